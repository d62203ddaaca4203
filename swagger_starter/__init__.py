"""
SWAGGER_STARTER - Swagger technology provider for the Liberty app accelerator

Components:
- config.py: Environment-driven settings
- models.py: Pydantic models for provider metadata, server config, samples
- provider.py: YAML provider descriptor loading and validation
- packaging.py: Staging of option subtrees into the `package` subtree
- matchers.py: Ordered line matchers for asserting on generated files
- api_server.py: FastAPI server for the /api/v1/provider endpoints
- cli.py: Command line access to serving, staging and line checks
"""

__version__ = "0.0.3"

# Lazy imports - importing the package must not start the API server setup
def __getattr__(name):
    if name == "prepare_packages":
        from .packaging import prepare_packages
        return prepare_packages
    elif name == "StagingResult":
        from .packaging import StagingResult
        return StagingResult
    elif name == "contains_lines_in_relative_order":
        from .matchers import contains_lines_in_relative_order
        return contains_lines_in_relative_order
    elif name == "assert_that":
        from .matchers import assert_that
        return assert_that
    elif name == "load_descriptor":
        from .provider import load_descriptor
        return load_descriptor
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "prepare_packages",
    "StagingResult",
    "contains_lines_in_relative_order",
    "assert_that",
    "load_descriptor",
]
