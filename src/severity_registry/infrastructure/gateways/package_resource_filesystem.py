"""FileSystemProtocol implementation that reads from package resources via importlib.resources."""

from importlib.resources import files

from severity_registry.domain.protocols import FileSystemProtocol


class PackageResourceFileSystem(FileSystemProtocol):
    """Reads package data via importlib.resources. Supports reads only; write ops raise."""

    def __init__(self, package: str = "severity_registry") -> None:
        self._package = package

    def _resource_path(self, path: str) -> str:
        """Normalize path for package resources (forward slashes, no leading slash)."""
        return path.replace("\\", "/").lstrip("/")

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text from a package resource."""
        resource_path = self._resource_path(path)
        traversable = files(self._package).joinpath(*resource_path.split("/"))
        return traversable.read_text(encoding=encoding)

    def exists(self, path: str) -> bool:
        """Check if resource exists in package."""
        resource_path = self._resource_path(path)
        traversable = files(self._package).joinpath(*resource_path.split("/"))
        return traversable.is_file()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Package resources are read-only."""
        raise NotImplementedError("write_text not supported for package resources")

    def make_dirs(self, path: str, exist_ok: bool = True) -> None:
        """Package resources are read-only."""
        raise NotImplementedError("make_dirs not supported for package resources")

    def parent_dir(self, path: str) -> str:
        """Return the parent resource directory."""
        return self._resource_path(path).rpartition("/")[0]
