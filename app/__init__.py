# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers, lifespan
# - config.py: Environment variable loading and settings
# - dependencies.py: Store handle injection
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# to core/ and lib/.
# =============================================================================
