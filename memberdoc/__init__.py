"""
memberdoc: documentation builders for declared types and their members.

Example:
    from memberdoc import BuildContext, BuilderFactory, MarkdownWriterFactory
    from memberdoc.model import load_types_file

    context = BuildContext()
    factory = BuilderFactory(context, MarkdownWriterFactory(context.options))
    for type_element in load_types_file("model.yaml"):
        print(factory.get_type_page_builder(type_element).build_page().render())
"""

from importlib.metadata import PackageNotFoundError, version

from .builders import (
    AbstractBuilder,
    AbstractMemberBuilder,
    BuildContext,
    BuilderFactory,
    EnumConstantBuilder,
    TypePageBuilder,
)
from .config import BuildOptions, DocConfig, load_config
from .exceptions import (
    BuildError,
    ConfigError,
    DocError,
    ModelError,
    ResolutionError,
    WriterError,
)
from .members import Kind, VisibleMemberCache, VisibleMemberTable
from .writers import (
    EnumConstantWriter,
    MarkdownEnumConstantWriter,
    MarkdownWriterFactory,
    TypeWriter,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("memberdoc")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    # Builders
    "AbstractBuilder",
    "AbstractMemberBuilder",
    "BuildContext",
    "BuilderFactory",
    "EnumConstantBuilder",
    "TypePageBuilder",
    # Configuration
    "BuildOptions",
    "DocConfig",
    "load_config",
    # Members
    "Kind",
    "VisibleMemberCache",
    "VisibleMemberTable",
    # Writers
    "EnumConstantWriter",
    "MarkdownEnumConstantWriter",
    "MarkdownWriterFactory",
    "TypeWriter",
    # Exceptions
    "BuildError",
    "ConfigError",
    "DocError",
    "ModelError",
    "ResolutionError",
    "WriterError",
]
