"""Infrastructure modules for the user migration trigger.

Centralized infrastructure components:
- configuration: Settings management (Settings)
- logging: Structured logging (get_module_logger, bind_request_context)
- operations: Operation results and error classification
- clients: AWS clients (CognitoIdpClient, SessionProvider)
- services: Process-scoped providers (get_settings, build_legacy_cognito_client)
"""
