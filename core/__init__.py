# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# - services/: Operations the API routes delegate to
# =============================================================================
