from suite_money.domain.monetary.currency import Currency


# Americas
USD = Currency("USD", 2, "$", "$1", ".", ",")
CAD = Currency("CAD", 2, "$", "$1", ".", ",")
BRL = Currency("BRL", 2, "R$", "$1", ",", ".")
MXN = Currency("MXN", 2, "$", "$1", ".", ",")

# Europe
EUR = Currency("EUR", 2, "€", "$1", ".", ",")
GBP = Currency("GBP", 2, "£", "$1", ".", ",")
CHF = Currency("CHF", 2, "CHF", "1 $", ".", ",")
CZK = Currency("CZK", 2, "Kč", "1 $", ",", ".")
DKK = Currency("DKK", 2, "kr", "1 $", ",", ".")
NOK = Currency("NOK", 2, "kr", "1 $", ",", ".")
PLN = Currency("PLN", 2, "zł", "1 $", ",", ".")
SEK = Currency("SEK", 2, "kr", "1 $", ",", ".")

# Asia & Pacific
AUD = Currency("AUD", 2, "$", "$1", ".", ",")
CNY = Currency("CNY", 2, "元", "1 $", ".", ",")
HKD = Currency("HKD", 2, "$", "$1", ".", ",")
INR = Currency("INR", 2, "₹", "$1", ".", ",")
JPY = Currency("JPY", 0, "¥", "$1", ".", ",")
KRW = Currency("KRW", 0, "₩", "$1", ".", ",")
NZD = Currency("NZD", 2, "$", "$1", ".", ",")
SGD = Currency("SGD", 2, "$", "$1", ".", ",")

# Middle East & Africa
AED = Currency("AED", 2, ".\u062f.\u0625", "1 $", ".", ",")
BHD = Currency("BHD", 3, ".\u062f.\u0628", "1 $", ".", ",")
IQD = Currency("IQD", 3, ".\u0639.\u062f", "1 $", ".", ",")
KWD = Currency("KWD", 3, ".\u062f.\u0643", "1 $", ".", ",")
ZAR = Currency("ZAR", 2, "R", "$1", ".", ",")

PREDEFINED = (
    USD, CAD, BRL, MXN,
    EUR, GBP, CHF, CZK, DKK, NOK, PLN, SEK,
    AUD, CNY, HKD, INR, JPY, KRW, NZD, SGD,
    AED, BHD, IQD, KWD, ZAR,
)

# Register all predefined currencies
for _currency in PREDEFINED:
    Currency.register(_currency, overwrite=True)
