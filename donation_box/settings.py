DEFAULT_FONT = "Bahnschrift"

# The box opens when the totaliser starts and stays open for this long.
DONATION_WINDOW_SECONDS = 30 * 60
DEFAULT_TARGET_ETHER = 10
CURRENCY_SYMBOL = "Ξ"

DEFAULT_OWNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

TOKEN_NAME = "Simple Token"
TOKEN_SYMBOL = "SIMPLE"
TOKEN_DECIMALS = 18
TOKEN_INITIAL_SUPPLY = 1_000_000

NFT_NAME = "Simple NFT Collection"
NFT_SYMBOL = "SNFT"
NFT_MAX_SUPPLY = 10_000
