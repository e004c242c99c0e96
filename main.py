from gratitude.api.app import create_app
from gratitude.bootstrap import build_clients, build_registry
from gratitude.core.config import settings
from gratitude.core.database import Database
from gratitude.core.log_config import setup_logging
from gratitude.rpc.server import create_rpc_app

# =====================================================================
# LOGGING
# =====================================================================

setup_logging(settings.LOG_LEVEL)

# =====================================================================
# DATABASE INITIALIZATION
# =====================================================================

database = Database.from_settings(settings)
database.create_tables()

# =====================================================================
# SERVICES
# =====================================================================

registry = build_registry(database)

# Domain services over HTTP: uvicorn main:rpc_app --port 50051
rpc_app = create_rpc_app(registry)

# =====================================================================
# GATEWAY
# =====================================================================

# Presentation-facing facade: uvicorn main:app --port 5000
app = create_app(settings, build_clients(settings, registry))
