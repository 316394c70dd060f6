"""
OpenSCAD compiler wrapper — runs openscad CLI for syntax checking and STL rendering.
"""

from __future__ import annotations

import logging
import re
import shutil
import struct
import subprocess
import tempfile
from pathlib import Path

log = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]

# a full honeycomb panel takes minutes under the CGAL backend
COMPILE_TIMEOUT_S = 900
CHECK_TIMEOUT_S = 30


def _find_openscad() -> str | None:
    """Locate the openscad binary."""
    path = shutil.which("openscad")
    if path:
        return path
    # Common Windows locations
    for candidate in [
        r"C:\Program Files\OpenSCAD\openscad.exe",
        r"C:\Program Files (x86)\OpenSCAD\openscad.exe",
    ]:
        if Path(candidate).exists():
            return candidate
    return None


def openscad_available() -> bool:
    return _find_openscad() is not None


def check_scad(scad_path: Path) -> tuple[bool, str]:
    """
    Syntax-check an OpenSCAD file without rendering geometry.

    Returns (ok, message).
    """
    exe = _find_openscad()
    if not exe:
        return False, "OpenSCAD not found on PATH."

    with tempfile.TemporaryDirectory() as tmp:
        echo_path = Path(tmp) / "check.echo"
        try:
            result = subprocess.run(
                [exe, "-o", str(echo_path), str(scad_path)],
                capture_output=True,
                text=True,
                timeout=CHECK_TIMEOUT_S,
            )
        except subprocess.TimeoutExpired:
            return False, f"OpenSCAD timed out ({CHECK_TIMEOUT_S}s)."
        except OSError as e:
            return False, str(e)
    stderr = result.stderr.strip()
    if result.returncode == 0:
        return True, stderr or "OK"
    return False, stderr or f"OpenSCAD exited with code {result.returncode}"


def compile_scad(scad_path: Path, stl_path: Path | None = None) -> tuple[bool, str, Path | None]:
    """
    Compile an OpenSCAD file to STL.

    Returns (ok, message, stl_path_or_none).
    """
    exe = _find_openscad()
    if not exe:
        return False, "OpenSCAD not found on PATH.", None

    if stl_path is None:
        stl_path = scad_path.with_suffix(".stl")

    log.info("Compiling %s -> %s", scad_path, stl_path)
    try:
        result = subprocess.run(
            [exe, "-o", str(stl_path), str(scad_path)],
            capture_output=True,
            text=True,
            timeout=COMPILE_TIMEOUT_S,
        )
    except subprocess.TimeoutExpired:
        return False, f"OpenSCAD timed out ({COMPILE_TIMEOUT_S}s).", None
    except OSError as e:
        return False, str(e), None

    stderr = result.stderr.strip()
    if result.returncode == 0 and stl_path.exists():
        return True, stderr or "OK", stl_path
    log.warning("OpenSCAD failed on %s (exit %d)", scad_path, result.returncode)
    return False, stderr or f"OpenSCAD exited with code {result.returncode}", None


# ── STL reading ─────────────────────────────────────────────────────

_FLOAT = r"([\d.eE+\-]+)"
_FACET_RE = re.compile(
    r"facet\s+normal\s+" + r"\s+".join([_FLOAT] * 3) + r"\s+outer\s+loop\s+"
    + r"".join(r"vertex\s+" + r"\s+".join([_FLOAT] * 3) + r"\s+" for _ in range(3))
    + r"endloop\s+endfacet",
    re.IGNORECASE,
)


def _parse_stl(data: bytes) -> list[tuple[Vec3, Vec3, Vec3, Vec3]]:
    """Parse an STL file (binary or ASCII) into a list of triangles.

    Each triangle is (normal, v1, v2, v3) where each is (x, y, z).
    """
    triangles = []

    # ASCII files start with 'solid'; binary headers occasionally do too
    if data[:5] == b"solid" and b"\n" in data[:256] and b"facet" in data[:1024]:
        text = data.decode("ascii", errors="replace")
        for m in _FACET_RE.finditer(text):
            vals = [float(m.group(i)) for i in range(1, 13)]
            triangles.append((
                tuple(vals[0:3]), tuple(vals[3:6]), tuple(vals[6:9]), tuple(vals[9:12]),
            ))
        return triangles

    # Binary STL: 80-byte header, 4-byte count, 50 bytes per triangle
    if len(data) < 84:
        return []
    n = struct.unpack_from("<I", data, 80)[0]
    off = 84
    for _ in range(n):
        if off + 50 > len(data):
            break
        vals = struct.unpack_from("<12f", data, off)
        triangles.append((
            tuple(vals[0:3]), tuple(vals[3:6]), tuple(vals[6:9]), tuple(vals[9:12]),
        ))
        off += 50
    return triangles


def stl_bounds(stl_path: Path) -> tuple[Vec3, Vec3] | None:
    """Axis-aligned bounds of an STL mesh, or None if it holds no triangles."""
    triangles = _parse_stl(Path(stl_path).read_bytes())
    if not triangles:
        return None
    verts = [v for tri in triangles for v in tri[1:]]
    lo = tuple(min(v[i] for v in verts) for i in range(3))
    hi = tuple(max(v[i] for v in verts) for i in range(3))
    return lo, hi
