import os

# Application Metadata
PROJECT_NAME = "Stockroom Maintenance Inventory"
VERSION = "1.0.0"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Catalog Configuration
# Seed the factory maintenance catalog on startup (the catalog is held in memory only)
SEED_DEFAULT_CATALOG = os.getenv("SEED_DEFAULT_CATALOG", "true").lower() in ("1", "true", "yes")

# History Configuration
HISTORY_PAGE_SIZE = int(os.getenv("HISTORY_PAGE_SIZE", 50)) # Default number of records returned by /transactions
