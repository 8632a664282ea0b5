"""
Distribution function engine components.

Evaluation pipeline for a single function call:

    DistributionFactory -> Evaluator -> ScalarUDF -> Polars map_batches

Modules:
    factory: Parameter validation and scipy.stats distribution construction
    evaluator: Binds a statistic (pdf, cdf, ...) to a factory
    udf: Signatures and the vectorised row-wise function wrapper
    registry: Function namespaces and name resolution
    namespace: Polars namespace registration

Polars Namespaces:
    Registered when this package is imported.
    - lf.dist: Add a registered function's result as a column
    - expr.dist: Evaluate a function at an expression
"""

# Import namespace module to register namespaces on module load
import polars_distributions.engine.namespace  # noqa: F401

from .evaluator import Evaluator
from .factory import DistributionFactory, ParameterCheck
from .namespace import DistributionExpr, DistributionLazyFrame
from .registry import FunctionRegistry, call_function, lookup, register
from .udf import ScalarUDF, Signature

__all__ = [
    "DistributionFactory",
    "ParameterCheck",
    "Evaluator",
    "ScalarUDF",
    "Signature",
    "FunctionRegistry",
    "register",
    "lookup",
    "call_function",
    # Namespace classes
    "DistributionLazyFrame",
    "DistributionExpr",
]
