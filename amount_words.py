"""Amounts in words, Indian numbering (thousand, lakh, crore)."""
from decimal import ROUND_FLOOR

from tax_calc import money

ONES = ['', 'One', 'Two', 'Three', 'Four', 'Five', 'Six', 'Seven', 'Eight', 'Nine',
        'Ten', 'Eleven', 'Twelve', 'Thirteen', 'Fourteen', 'Fifteen', 'Sixteen',
        'Seventeen', 'Eighteen', 'Nineteen']
TENS = ['', '', 'Twenty', 'Thirty', 'Forty', 'Fifty', 'Sixty', 'Seventy', 'Eighty', 'Ninety']

# (size, word), largest first; "and" only appears inside the hundreds group
PLACES = ((10000000, 'Crore'), (100000, 'Lakh'), (1000, 'Thousand'))


def _words(n: int) -> str:
    if n == 0:
        return ''
    if n < 20:
        return ONES[n]
    if n < 100:
        return TENS[n // 10] + (' ' + ONES[n % 10] if n % 10 else '')
    if n < 1000:
        return ONES[n // 100] + ' Hundred' + (' and ' + _words(n % 100) if n % 100 else '')
    for size, word in PLACES:
        if n >= size:
            rest = n % size
            return _words(n // size) + ' ' + word + (' ' + _words(rest) if rest else '')
    return ''


def number_to_words(amount) -> str:
    """
    >>> number_to_words(123456.75)
    'One Lakh Twenty Three Thousand Four Hundred and Fifty Six Rupees and Seventy Five Paise Only'
    """
    num = money(amount)
    if num == 0:
        return 'Zero'

    # paise are rounded first so 0.999 carries into the rupees
    sign = 'Minus ' if num < 0 else ''
    num = abs(num)
    whole = num.to_integral_value(rounding=ROUND_FLOOR)
    paise = int((num - whole) * 100)

    result = sign + (_words(int(whole)) or 'Zero') + ' Rupees'
    if paise > 0:
        result += ' and ' + _words(paise) + ' Paise'
    return result + ' Only'
