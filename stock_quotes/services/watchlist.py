"""Fixed watchlists served when callers do not ask for specific symbols."""

# 27 large caps across technology, financials, energy and consumer
DEFAULT_WATCHLIST: tuple[str, ...] = (
    "AAPL", "GOOGL", "MSFT", "NVDA", "AMZN", "META", "BRK.B", "JPM",
    "XOM", "TSM", "TM", "WMT", "BAC", "V", "JNJ", "PG", "MA", "HD",
    "CVX", "MRK", "PFE", "ABBV", "KO", "PEP", "COST", "AVGO", "ORCL",
)

# symbol -> (name, short symbol) for the global watchlist shown by the web client
_GLOBAL_WATCHLIST: dict[str, tuple[str, str]] = {
    "2222.SR": ("Saudi Aramco", "ARAMCO"),
    "GOOG": ("Alphabet", "GOOG"),
    "AAPL": ("Apple", "AAPL"),
    "MSFT": ("Microsoft", "MSFT"),
    "NVDA": ("NVIDIA", "NVDA"),
    "AMZN": ("Amazon", "AMZN"),
    "BRK.B": ("Berkshire", "BRK.B"),
    "META": ("Meta", "META"),
    "JPM": ("JPMorgan", "JPM"),
    "1398.HK": ("ICBC", "ICBC"),
    "601939.SS": ("CCB", "CCB"),
    "XOM": ("Exxon", "XOM"),
    "601288.SS": ("ABC", "ABC"),
    "TSM": ("TSMC", "TSM"),
    "601988.SS": ("BOC", "BOC"),
    "TM": ("Toyota", "TM"),
    "0857.HK": ("PetroChina", "PTRCN"),
    "WMT": ("Walmart", "WMT"),
    "TCEHY": ("Tencent", "TCEHY"),
    "BAC": ("BofA", "BAC"),
    "EQNR": ("Equinor", "EQNR"),
    "JNJ": ("J&J", "JNJ"),
    "DTE.DE": ("DT Telekom", "DTE"),
    "CMCSA": ("Comcast", "CMCSA"),
    "UNH": ("UnitedHealth", "UNH"),
    "HSBC": ("HSBC", "HSBC"),
    "SHEL": ("Shell", "SHEL"),
}

# logo image per global watchlist symbol
_LOGOS: dict[str, str] = {
    "2222.SR": "https://upload.wikimedia.org/wikipedia/en/thumb/9/9c/Saudi_Aramco_logo.svg/1200px-Saudi_Aramco_logo.svg.png",
    "GOOG": "https://thumbs.dreamstime.com/b/google-logo-vector-format-white-background-illustration-407571048.jpg",
    "AAPL": "https://fabrikbrands.com/wp-content/uploads/Apple-Logo-History-1-1155x770.png",
    "MSFT": "https://static.vecteezy.com/system/resources/previews/027/127/473/non_2x/microsoft-logo-microsoft-icon-transparent-free-png.png",
    "NVDA": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSVEu8tfOJpA-vMjPqyI2gEyaDjTaI7tSJFzQ&s",
    "AMZN": "https://static.vecteezy.com/system/resources/previews/014/018/561/non_2x/amazon-logo-on-transparent-background-free-vector.jpg",
    "BRK.B": "https://www.shutterstock.com/shutterstock/photos/2378735305/display_1500/stock-vector-brk-letter-logo-design-on-a-white-background-or-monogram-logo-design-for-entrepreneur-and-business-2378735305.jpg",
    "META": "https://img.freepik.com/premium-vector/meta-company-logo_265339-667.jpg",
    "JPM": "https://e7.pngegg.com/pngimages/225/668/png-clipart-jpmorgan-chase-logo-bank-business-morgan-stanley-bank-text-logo.png",
    "1398.HK": "https://upload.wikimedia.org/wikipedia/commons/thumb/4/4d/Industrial_and_Commercial_Bank_of_China_logo.svg/2560px-Industrial_and_Commercial_Bank_of_China_logo.svg.png",
    "601939.SS": "https://upload.wikimedia.org/wikipedia/en/thumb/e/e1/China_Construction_Bank_logo.svg/1200px-China_Construction_Bank_logo.svg.png",
    "XOM": "https://upload.wikimedia.org/wikipedia/commons/thumb/4/44/ExxonMobil.svg/2560px-ExxonMobil.svg.png",
    "601288.SS": "https://upload.wikimedia.org/wikipedia/en/thumb/5/5a/Agricultural_Bank_of_China_logo.svg/1200px-Agricultural_Bank_of_China_logo.svg.png",
    "TSM": "https://upload.wikimedia.org/wikipedia/en/thumb/6/63/Tsmc.svg/1200px-Tsmc.svg.png",
    "601988.SS": "https://upload.wikimedia.org/wikipedia/en/thumb/d/d5/Bank_of_China_%28logo%29.svg/1200px-Bank_of_China_%28logo%29.svg.png",
    "TM": "https://global.toyota/pages/global_toyota/mobility/toyota-brand/emblem_001.jpg",
    "0857.HK": "https://upload.wikimedia.org/wikipedia/en/thumb/f/fc/PetroChina_logo.svg/1200px-PetroChina_logo.svg.png",
    "WMT": "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcRxwPUD4NGc7WTQVqDstT5ZPRQXm6ka0KTsmTsKfiY&usqp=CAE&s",
    "TCEHY": "https://upload.wikimedia.org/wikipedia/commons/thumb/2/22/Tencent_Logo.svg/2560px-Tencent_Logo.svg.png",
    "BAC": "https://www.bankofamerica.com/content/images/ContextualSiteGraphics/Logos/en_US/logos/bac-logo-v2.png",
    "EQNR": "https://upload.wikimedia.org/wikipedia/commons/thumb/1/14/Equinor_Logo.svg/2560px-Equinor_Logo.svg.png",
    "JNJ": "https://upload.wikimedia.org/wikipedia/commons/thumb/4/48/JohnsonandJohnsonLogo.svg/2560px-JohnsonandJohnsonLogo.svg.png",
    "DTE.DE": "https://upload.wikimedia.org/wikipedia/commons/thumb/a/ab/Deutsche_Telekom-Logo.svg/2560px-Deutsche_Telekom-Logo.svg.png",
    "CMCSA": "https://upload.wikimedia.org/wikipedia/commons/thumb/f/ff/Comcast_Logo.svg/2560px-Comcast_Logo.svg.png",
    "UNH": "https://upload.wikimedia.org/wikipedia/commons/thumb/f/f0/UnitedHealth_Group_logo.svg/2560px-UnitedHealth_Group_logo.svg.png",
    "HSBC": "https://upload.wikimedia.org/wikipedia/commons/thumb/a/aa/HSBC_logo_%282018%29.svg/2560px-HSBC_logo_%282018%29.svg.png",
    "SHEL": "https://upload.wikimedia.org/wikipedia/en/thumb/e/e8/Shell_logo.svg/1200px-Shell_logo.svg.png",
}


GLOBAL_WATCHLIST: tuple[str, ...] = tuple(_GLOBAL_WATCHLIST)


def default_symbols() -> list[str]:
    return list(DEFAULT_WATCHLIST)


def display_name(symbol: str) -> str:
    entry = _GLOBAL_WATCHLIST.get(symbol)
    return entry[0] if entry else symbol


def short_symbol(symbol: str) -> str:
    entry = _GLOBAL_WATCHLIST.get(symbol)
    return entry[1] if entry else symbol


def logo_url(symbol: str) -> str:
    return _LOGOS.get(symbol, "")
