"""Loading localization documents through pluggable resource loaders.

A ResourceLoader turns a resource id ("menus/main.xml") into XML source.
load_resources() feeds several documents into one Localizer, in order, and
reports what happened to each in a LoadSummary: missing or unreadable
resources are recorded and skipped, malformed documents abort the call.

Components:
    ResourceLoader - Structural protocol for custom loaders
    PathResourceLoader - Loader reading files below a base directory
    ResourceLoadResult - Outcome of one resource
    LoadSummary - Outcomes of one load_resources() call
    load_resources - Load several documents into one Localizer

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import TYPE_CHECKING, Protocol

from ctxi18n.constants import MAX_DEPTH
from ctxi18n.diagnostics import ConfigurationError
from ctxi18n.diagnostics.templates import ErrorTemplate
from ctxi18n.enums import LoadStatus
from ctxi18n.localization.loader import load_document
from ctxi18n.localization.types import ResourceId, XMLSource
from ctxi18n.syntax import parse_document

if TYPE_CHECKING:
    from ctxi18n.runtime.localizer import Localizer

__all__ = [
    "LoadSummary",
    "PathResourceLoader",
    "ResourceLoadResult",
    "ResourceLoader",
    "load_resources",
]

logger = logging.getLogger(__name__)


class ResourceLoader(Protocol):
    """Source of localization documents.

    Any object with a matching load() method qualifies; subclassing is not
    required. Documents may come from package data, a database or a
    translation service.

    Example:
        >>> class PackageLoader:
        ...     def load(self, resource_id: str) -> bytes:
        ...         return importlib.resources.files("myapp.i18n").joinpath(resource_id).read_bytes()
        ...     def describe_path(self, resource_id: str) -> str:
        ...         return f"myapp.i18n/{resource_id}"
        ...
        >>> summary = Localizer("es").load_resources(["main.xml"], PackageLoader())
    """

    def load(self, resource_id: ResourceId) -> XMLSource:
        """Return the XML source of a document.

        Raises:
            FileNotFoundError: The document does not exist
            OSError: The document exists but cannot be read
            ValueError: The resource id is not acceptable to this loader
        """

    def describe_path(self, resource_id: ResourceId) -> str:
        """Location of a document as shown in diagnostics and load results."""
        return resource_id


@dataclass(frozen=True, slots=True)
class PathResourceLoader:
    """Reads documents from files below base_path.

    Resource ids are relative POSIX-style paths. Ids that are empty, padded
    with whitespace, absolute (in POSIX or Windows form) or containing ".."
    are refused, as are ids whose resolved path lands outside base_path
    through a symlink.

    Example:
        >>> loader = PathResourceLoader("i18n")
        >>> loader.load("menus/main.xml")  # reads i18n/menus/main.xml

    Attributes:
        base_path: Directory holding the documents
    """

    base_path: str
    _root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_root", Path(self.base_path).resolve())

    def describe_path(self, resource_id: ResourceId) -> str:
        """Path of the document relative to the working directory."""
        return str(Path(self.base_path) / resource_id)

    def load(self, resource_id: ResourceId) -> bytes:
        """Read a document as undecoded bytes.

        The XML declaration of the document decides its encoding.

        Raises:
            ValueError: If resource_id is refused
            FileNotFoundError: If the document does not exist
            OSError: If the document cannot be read
        """
        return self._locate(resource_id).read_bytes()

    def _locate(self, resource_id: ResourceId) -> Path:
        if not resource_id or resource_id != resource_id.strip():
            msg = f"Invalid resource id {resource_id!r}: empty or padded with whitespace"
            raise ValueError(msg)

        posix, windows = PurePosixPath(resource_id), PureWindowsPath(resource_id)
        if posix.is_absolute() or windows.is_absolute() or windows.anchor:
            msg = f"Invalid resource id {resource_id!r}: must be a relative path"
            raise ValueError(msg)
        if ".." in posix.parts or ".." in windows.parts:
            msg = f"Invalid resource id {resource_id!r}: '..' is not allowed"
            raise ValueError(msg)

        path = (self._root / resource_id).resolve()
        if not path.is_relative_to(self._root):
            msg = f"Invalid resource id {resource_id!r}: escapes root directory {self.base_path}"
            raise ValueError(msg)
        return path


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Outcome of loading one resource.

    Attributes:
        resource_id: Id passed to the loader
        status: SUCCESS, NOT_FOUND or ERROR
        error: Exception raised by the loader when status is ERROR
        source_path: Location reported by the loader's describe_path()
    """

    resource_id: ResourceId
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None

    @property
    def ok(self) -> bool:
        """True if the document was loaded."""
        return self.status is LoadStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Outcomes of one load_resources() call, in load order.

    Example:
        >>> summary = localizer.load_resources(["ui.xml", "errors.xml"], loader)
        >>> for result in summary.with_status(LoadStatus.ERROR):
        ...     print(f"{result.source_path}: {result.error}")

    Attributes:
        results: One result per requested resource
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, ok={self.successful}, "
            f"not_found={self.not_found}, errors={self.errors})"
        )

    def count(self, status: LoadStatus) -> int:
        """Number of results with the given status."""
        return sum(result.status is status for result in self.results)

    def with_status(self, status: LoadStatus) -> tuple[ResourceLoadResult, ...]:
        """Results with the given status, in load order."""
        return tuple(result for result in self.results if result.status is status)

    @property
    def total_attempted(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return self.count(LoadStatus.SUCCESS)

    @property
    def not_found(self) -> int:
        return self.count(LoadStatus.NOT_FOUND)

    @property
    def errors(self) -> int:
        return self.count(LoadStatus.ERROR)

    @property
    def has_errors(self) -> bool:
        """True if any resource existed but could not be read."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """True if every resource was found and loaded."""
        return all(result.ok for result in self.results)


def load_resources(
    node: Localizer,
    resource_ids: Iterable[ResourceId],
    resource_loader: ResourceLoader,
    *,
    merge: bool = True,
    max_depth: int = MAX_DEPTH,
) -> LoadSummary:
    """Load several localization documents into node, in order.

    Later documents override keys of earlier ones.

    Args:
        node: Localizer receiving the entries; its target language must be set
        resource_ids: Documents to load, in priority order (last wins)
        resource_loader: Loader fetching each document
        merge: When False, node is cleared once, just before the first
               document that was found and has a valid root element. If no
               document gets that far, node is left untouched.
        max_depth: Maximum nesting of Context elements

    Returns:
        LoadSummary with one result per resource id

    Raises:
        ConfigurationError: If node has no target language
        ParseError: If a document is malformed. Documents loaded before it
                    stay loaded.
    """
    if node.language is None:
        raise ConfigurationError(ErrorTemplate.language_not_set())

    # The first document that loads decides whether node is cleared; its root
    # is checked before anything is removed.
    replace = not merge
    results: list[ResourceLoadResult] = []
    for resource_id in resource_ids:
        source_path = resource_loader.describe_path(resource_id)
        try:
            source = resource_loader.load(resource_id)
        except FileNotFoundError:
            logger.warning("Localization resource not found: %s", source_path)
            results.append(ResourceLoadResult(resource_id, LoadStatus.NOT_FOUND, None, source_path))
            continue
        except (OSError, ValueError) as e:
            logger.warning("Cannot read localization resource %s: %s", source_path, e)
            results.append(ResourceLoadResult(resource_id, LoadStatus.ERROR, e, source_path))
            continue

        document = parse_document(source, source_path=source_path)
        load_document(
            node, document, merge=not replace, source_path=source_path, max_depth=max_depth
        )
        replace = False
        results.append(ResourceLoadResult(resource_id, LoadStatus.SUCCESS, None, source_path))

    summary = LoadSummary(tuple(results))
    logger.info("Localization resources loaded: %r", summary)
    return summary
