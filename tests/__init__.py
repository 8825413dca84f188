# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_config.py: Settings defaults and environment overrides
# - test_database.py: UserStore against a real SQLite database
# - test_user_service.py: Service layer with fake stores
# - test_users_api.py: GET /users over HTTP
# - test_health.py: Health endpoints and app lifespan
#
# Run tests with: pytest
# =============================================================================
