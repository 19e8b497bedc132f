"""DeFiLlama yields API configuration."""

DEFILLAMA_BASE_URL = "https://yields.llama.fi"
DEFILLAMA_POOLS_PATH = "/pools"

DEFILLAMA_API_RATE_LIMIT = 10  # requests per minute
DEFILLAMA_API_RATE_WINDOW = 60  # seconds

# Pool filters
SUPPORTED_PROJECTS = ("aave-v3", "compound-v3", "makerdao")
STABLECOIN_SYMBOLS = ("USDC", "USDT", "DAI")
