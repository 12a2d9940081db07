"""
Service layer.

Each service encapsulates the business logic of one domain so that the
API handlers stay thin: they parse the request, call a service and
return its result.
"""
