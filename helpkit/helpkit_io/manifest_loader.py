# helpkit/helpkit_io/manifest_loader.py
# Load the command manifest JSON into a read-only ManifestRegistry

from __future__ import annotations

from pathlib import Path

from ..core.manifest import ManifestRegistry
from ..core.verbose import vlog
from .generics import read_json_safe

# sample manifest shipped w/ the package
BUNDLED_MANIFEST = Path(__file__).resolve().parent.parent / "manifest" / "commands.json"


# * Read & build the registry once; raises FileReadError, JSONParsingError or ManifestError
def load_manifest(path: Path | str | None = None) -> ManifestRegistry:
    manifest_path = Path(path) if path else BUNDLED_MANIFEST
    raw = read_json_safe(manifest_path)
    registry = ManifestRegistry.from_mapping(raw)
    vlog("MANIFEST", f"Loaded {len(registry)} commands from {manifest_path}")
    return registry
