"""
Storefront configuration from environment variables.

Values are read once at import; a local `.env` file is loaded first when present.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Catalog service (public mock REST API)
CATALOG_API_URL = os.environ.get("CATALOG_API_URL", "https://fakestoreapi.com")
CATALOG_TIMEOUT = float(os.environ.get("CATALOG_TIMEOUT", "10"))

# Supabase (auth + user/product documents)
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_KEY = os.environ.get("SUPABASE_KEY", "")

# Admin panel access is granted to this account only
ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@example.com")

# In-memory web sessions
SESSION_TTL_DAYS = int(os.environ.get("SESSION_TTL_DAYS", "7"))
# Oldest sessions are evicted beyond this many
MAX_SESSIONS = int(os.environ.get("MAX_SESSIONS", "10000"))
