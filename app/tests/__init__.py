"""
Tests Package

Test suite for the load recommendation service.

Modules:
- test_algorithms: Factor scorers and composite scoring of a single load
- test_recommendations: Ranking pipeline, forward-leg planner, market insights
- test_schemas: Ingestion-boundary value types
- test_fleet_client: Fleet service client with a mocked transport
- test_api: FastAPI endpoints with the fleet client monkeypatched

Run all tests:
    pytest app/tests/

Run specific test file:
    pytest app/tests/test_algorithms.py -v
"""
