"""Framework type builder interface.

A FrameworkTypeBuilder shapes the intermediate representation into the
nested type structure a particular server framework's typed client expects.
Each framework provides its own implementation; implementations share no
code so their rendering rules stay directly comparable.
"""

from abc import ABC, abstractmethod

from yag_openapi.core.models import APIModel, MethodModel, RouteModel
from yag_openapi.core.type_expr import TypeExpr

__all__ = ['FrameworkTypeBuilder']


class FrameworkTypeBuilder(ABC):
    """Builds framework-specific type expressions from an APIModel."""

    @abstractmethod
    def build_input_type(self, method: MethodModel) -> TypeExpr:
        """Build the type describing what a client sends to an operation."""
        pass

    @abstractmethod
    def build_output_type(self, method: MethodModel) -> TypeExpr:
        """Build the type describing what an operation responds with."""
        pass

    @abstractmethod
    def build_method_type(self, method: MethodModel) -> TypeExpr:
        pass

    @abstractmethod
    def build_route_type(self, route: RouteModel) -> TypeExpr:
        pass

    @abstractmethod
    def build_app_type(self, api: APIModel) -> TypeExpr:
        """Build the complete application type bound to the exported alias."""
        pass
