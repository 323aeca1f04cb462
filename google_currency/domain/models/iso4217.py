"""ISO 4217 currency table: active codes plus the precious-metal units and BTC."""

# (iso_code, name, symbol)
ISO_4217: tuple[tuple[str, str, str | None], ...] = (
	('AED', 'United Arab Emirates Dirham', 'د.إ'),
	('AFN', 'Afghan Afghani', '؋'),
	('ALL', 'Albanian Lek', 'L'),
	('AMD', 'Armenian Dram', '֏'),
	('ANG', 'Netherlands Antillean Gulden', 'ƒ'),
	('AOA', 'Angolan Kwanza', 'Kz'),
	('ARS', 'Argentine Peso', '$'),
	('AUD', 'Australian Dollar', '$'),
	('AWG', 'Aruban Florin', 'ƒ'),
	('AZN', 'Azerbaijani Manat', '₼'),
	('BAM', 'Bosnia and Herzegovina Convertible Mark', 'KM'),
	('BBD', 'Barbadian Dollar', '$'),
	('BDT', 'Bangladeshi Taka', '৳'),
	('BGN', 'Bulgarian Lev', 'лв'),
	('BHD', 'Bahraini Dinar', 'ب.د'),
	('BIF', 'Burundian Franc', 'Fr'),
	('BMD', 'Bermudian Dollar', '$'),
	('BND', 'Brunei Dollar', '$'),
	('BOB', 'Bolivian Boliviano', 'Bs.'),
	('BOV', 'Bolivian Mvdol', None),
	('BRL', 'Brazilian Real', 'R$'),
	('BSD', 'Bahamian Dollar', '$'),
	('BTC', 'Bitcoin', 'B⃦'),
	('BTN', 'Bhutanese Ngultrum', 'Nu.'),
	('BWP', 'Botswana Pula', 'P'),
	('BYN', 'Belarusian Ruble', 'Br'),
	('BZD', 'Belize Dollar', '$'),
	('CAD', 'Canadian Dollar', '$'),
	('CDF', 'Congolese Franc', 'Fr'),
	('CHE', 'WIR Euro', None),
	('CHF', 'Swiss Franc', 'Fr'),
	('CHW', 'WIR Franc', None),
	('CLF', 'Unidad de Fomento', 'UF'),
	('CLP', 'Chilean Peso', '$'),
	('CNY', 'Chinese Renminbi Yuan', '¥'),
	('COP', 'Colombian Peso', '$'),
	('COU', 'Unidad de Valor Real', None),
	('CRC', 'Costa Rican Colón', '₡'),
	('CUC', 'Cuban Convertible Peso', '$'),
	('CUP', 'Cuban Peso', '$'),
	('CVE', 'Cape Verdean Escudo', '$'),
	('CZK', 'Czech Koruna', 'Kč'),
	('DJF', 'Djiboutian Franc', 'Fdj'),
	('DKK', 'Danish Krone', 'kr'),
	('DOP', 'Dominican Peso', '$'),
	('DZD', 'Algerian Dinar', 'د.ج'),
	('EGP', 'Egyptian Pound', '£'),
	('ERN', 'Eritrean Nakfa', 'Nfk'),
	('ETB', 'Ethiopian Birr', 'Br'),
	('EUR', 'Euro', '€'),
	('FJD', 'Fijian Dollar', '$'),
	('FKP', 'Falkland Pound', '£'),
	('GBP', 'British Pound', '£'),
	('GEL', 'Georgian Lari', 'ლ'),
	('GHS', 'Ghanaian Cedi', '₵'),
	('GIP', 'Gibraltar Pound', '£'),
	('GMD', 'Gambian Dalasi', 'D'),
	('GNF', 'Guinean Franc', 'Fr'),
	('GTQ', 'Guatemalan Quetzal', 'Q'),
	('GYD', 'Guyanese Dollar', '$'),
	('HKD', 'Hong Kong Dollar', '$'),
	('HNL', 'Honduran Lempira', 'L'),
	('HTG', 'Haitian Gourde', 'G'),
	('HUF', 'Hungarian Forint', 'Ft'),
	('IDR', 'Indonesian Rupiah', 'Rp'),
	('ILS', 'Israeli New Sheqel', '₪'),
	('INR', 'Indian Rupee', '₹'),
	('IQD', 'Iraqi Dinar', 'ع.د'),
	('IRR', 'Iranian Rial', '﷼'),
	('ISK', 'Icelandic Króna', 'kr'),
	('JMD', 'Jamaican Dollar', '$'),
	('JOD', 'Jordanian Dinar', 'د.ا'),
	('JPY', 'Japanese Yen', '¥'),
	('KES', 'Kenyan Shilling', 'KSh'),
	('KGS', 'Kyrgyzstani Som', 'som'),
	('KHR', 'Cambodian Riel', '៛'),
	('KMF', 'Comorian Franc', 'Fr'),
	('KPW', 'North Korean Won', '₩'),
	('KRW', 'South Korean Won', '₩'),
	('KWD', 'Kuwaiti Dinar', 'د.ك'),
	('KYD', 'Cayman Islands Dollar', '$'),
	('KZT', 'Kazakhstani Tenge', '₸'),
	('LAK', 'Lao Kip', '₭'),
	('LBP', 'Lebanese Pound', 'ل.ل'),
	('LKR', 'Sri Lankan Rupee', '₨'),
	('LRD', 'Liberian Dollar', '$'),
	('LSL', 'Lesotho Loti', 'L'),
	('LYD', 'Libyan Dinar', 'ل.د'),
	('MAD', 'Moroccan Dirham', 'د.م.'),
	('MDL', 'Moldovan Leu', 'L'),
	('MGA', 'Malagasy Ariary', 'Ar'),
	('MKD', 'Macedonian Denar', 'ден'),
	('MMK', 'Myanmar Kyat', 'K'),
	('MNT', 'Mongolian Tögrög', '₮'),
	('MOP', 'Macanese Pataca', 'P'),
	('MRU', 'Mauritanian Ouguiya', 'UM'),
	('MUR', 'Mauritian Rupee', '₨'),
	('MVR', 'Maldivian Rufiyaa', 'MVR'),
	('MWK', 'Malawian Kwacha', 'MK'),
	('MXN', 'Mexican Peso', '$'),
	('MXV', 'Mexican Unidad de Inversion', None),
	('MYR', 'Malaysian Ringgit', 'RM'),
	('MZN', 'Mozambican Metical', 'MTn'),
	('NAD', 'Namibian Dollar', '$'),
	('NGN', 'Nigerian Naira', '₦'),
	('NIO', 'Nicaraguan Córdoba', 'C$'),
	('NOK', 'Norwegian Krone', 'kr'),
	('NPR', 'Nepalese Rupee', '₨'),
	('NZD', 'New Zealand Dollar', '$'),
	('OMR', 'Omani Rial', 'ر.ع.'),
	('PAB', 'Panamanian Balboa', 'B/.'),
	('PEN', 'Peruvian Sol', 'S/'),
	('PGK', 'Papua New Guinean Kina', 'K'),
	('PHP', 'Philippine Peso', '₱'),
	('PKR', 'Pakistani Rupee', '₨'),
	('PLN', 'Polish Złoty', 'zł'),
	('PYG', 'Paraguayan Guaraní', '₲'),
	('QAR', 'Qatari Riyal', 'ر.ق'),
	('RON', 'Romanian Leu', 'Lei'),
	('RSD', 'Serbian Dinar', 'РСД'),
	('RUB', 'Russian Ruble', '₽'),
	('RWF', 'Rwandan Franc', 'FRw'),
	('SAR', 'Saudi Riyal', 'ر.س'),
	('SBD', 'Solomon Islands Dollar', '$'),
	('SCR', 'Seychellois Rupee', '₨'),
	('SDG', 'Sudanese Pound', '£'),
	('SEK', 'Swedish Krona', 'kr'),
	('SGD', 'Singapore Dollar', '$'),
	('SHP', 'Saint Helenian Pound', '£'),
	('SLE', 'Sierra Leonean Leone', 'Le'),
	('SLL', 'Sierra Leonean Leone (1964)', 'Le'),
	('SOS', 'Somali Shilling', 'Sh'),
	('SRD', 'Surinamese Dollar', '$'),
	('SSP', 'South Sudanese Pound', '£'),
	('STN', 'São Tomé and Príncipe Dobra', 'Db'),
	('SVC', 'Salvadoran Colón', '₡'),
	('SYP', 'Syrian Pound', '£S'),
	('SZL', 'Swazi Lilangeni', 'E'),
	('THB', 'Thai Baht', '฿'),
	('TJS', 'Tajikistani Somoni', 'ЅМ'),
	('TMT', 'Turkmenistani Manat', 'T'),
	('TND', 'Tunisian Dinar', 'د.ت'),
	('TOP', 'Tongan Paʻanga', 'T$'),
	('TRY', 'Turkish Lira', '₺'),
	('TTD', 'Trinidad and Tobago Dollar', '$'),
	('TWD', 'New Taiwan Dollar', '$'),
	('TZS', 'Tanzanian Shilling', 'Sh'),
	('UAH', 'Ukrainian Hryvnia', '₴'),
	('UGX', 'Ugandan Shilling', 'USh'),
	('USD', 'United States Dollar', '$'),
	('USN', 'United States Dollar (Next Day)', '$'),
	('UYI', 'Uruguay Peso en Unidades Indexadas', None),
	('UYU', 'Uruguayan Peso', '$'),
	('UYW', 'Unidad Previsional', None),
	('UZS', 'Uzbekistan Som', "so'm"),
	('VED', 'Venezuelan Bolívar Digital', 'Bs.D'),
	('VES', 'Venezuelan Bolívar Soberano', 'Bs'),
	('VND', 'Vietnamese Đồng', '₫'),
	('VUV', 'Vanuatu Vatu', 'Vt'),
	('WST', 'Samoan Tala', 'T'),
	('XAF', 'Central African CFA Franc', 'Fr'),
	('XAG', 'Silver (Troy Ounce)', 'oz t'),
	('XAU', 'Gold (Troy Ounce)', 'oz t'),
	('XBA', 'European Composite Unit', None),
	('XBB', 'European Monetary Unit', None),
	('XBC', 'European Unit of Account 9', None),
	('XBD', 'European Unit of Account 17', None),
	('XCD', 'East Caribbean Dollar', '$'),
	('XCG', 'Caribbean Guilder', 'Cg'),
	('XDR', 'Special Drawing Rights', 'SDR'),
	('XOF', 'West African CFA Franc', 'Fr'),
	('XPD', 'Palladium', 'oz t'),
	('XPF', 'CFP Franc', 'Fr'),
	('XPT', 'Platinum', 'oz t'),
	('XSU', 'Sucre', None),
	('XUA', 'ADB Unit of Account', None),
	('YER', 'Yemeni Rial', '﷼'),
	('ZAR', 'South African Rand', 'R'),
	('ZMW', 'Zambian Kwacha', 'K'),
	('ZWG', 'Zimbabwe Gold', 'ZiG'),
	('ZWL', 'Zimbabwean Dollar', '$'),
)
