from services.mock.scope import mock_scope_analysis

__all__ = [
    "mock_scope_analysis",
]
