"""Currency codes accepted by the conversion command."""

CURRENCIES: list[str] = [
    'AED', 'ARS', 'AUD', 'BGN', 'BRL', 'BTC', 'CAD', 'CHF', 'CLP', 'CNY',
    'COP', 'CZK', 'DKK', 'EGP', 'ETH', 'EUR', 'GBP', 'HKD', 'HRK', 'HUF',
    'IDR', 'ILS', 'INR', 'ISK', 'JPY', 'KRW', 'KZT', 'MXN', 'MYR', 'NGN',
    'NOK', 'NZD', 'PEN', 'PHP', 'PKR', 'PLN', 'RON', 'RUB', 'SAR', 'SEK',
    'SGD', 'THB', 'TRY', 'TWD', 'UAH', 'USD', 'VND', 'ZAR',
]
