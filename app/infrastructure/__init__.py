"""Infrastructure modules for the auto-translate bot.

Centralized infrastructure components:
- configuration: Settings management
- logging: Structured logging (get_module_logger, bind_request_context)
- operations: Operation results (OperationResult, OperationStatus)
- auth: JWT validation of HTTP API callers
- clients: AWS, Slack and JSON HTTP clients
- services: Dependency injection providers (get_settings, get_preference_store)
"""
