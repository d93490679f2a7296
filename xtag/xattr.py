"""Reading and writing a named extended attribute on a filesystem path.

Extended attributes are used where the platform offers them; otherwise the
value lives in an alternate data stream named ``<path>:<name>``.
"""

from __future__ import annotations

import errno
import os

from xtag.types import ErrorType, XtagError

_ACCESS = frozenset({errno.EPERM, errno.EACCES})
_INVALID_PATH = frozenset({errno.ENOTDIR, errno.ENOENT})
_NOT_SUPPORTED = frozenset(
    code for code in (getattr(errno, "ENOTSUP", None), getattr(errno, "EOPNOTSUPP", None)) if code is not None
)
_NO_DATA = frozenset(
    code for code in (getattr(errno, "ENODATA", None), getattr(errno, "ENOATTR", None)) if code is not None
)
_TOO_BIG = frozenset({errno.ERANGE, errno.E2BIG})

_USE_XATTR = hasattr(os, "getxattr")


def validate_inputs(path: str | os.PathLike[str], name: str) -> None:
    """Raise if the path or the attribute name is empty."""
    if not os.fspath(path):
        raise XtagError(ErrorType.INVALID_ARGUMENT, "passed path is empty")
    if not name:
        raise XtagError(ErrorType.INVALID_ARGUMENT, "passed name is empty")


def _from_os_error(err: OSError, path: str, name: str) -> XtagError:
    code = err.errno
    if code in _ACCESS:
        return XtagError(ErrorType.ACCESS_DENIED, f"access denied: '{path}'")
    if code in _INVALID_PATH:
        return XtagError(ErrorType.INVALID_ARGUMENT, f"invalid path: '{path}'")
    if code == errno.ENAMETOOLONG:
        return XtagError(ErrorType.PATH_TOO_LONG, f"path too long: '{path}'")
    if code in _NOT_SUPPORTED:
        return XtagError(ErrorType.NOT_SUPPORTED, "xattr not supported / invalid namespace prefix")
    if code in _NO_DATA:
        return XtagError(ErrorType.NO_DATA, f"attribute not present: '{name}'")
    if code in _TOO_BIG:
        return XtagError(ErrorType.TOO_BIG, f"attribute name/value too large: '{name}'")
    return XtagError(ErrorType.UNKNOWN, "unknown error")


def _encode(value: str) -> bytes:
    return value.encode("utf-8", "surrogateescape")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


def _xattr_get(path: str, name: str) -> str:
    try:
        return _decode(os.getxattr(path, name))
    except OSError as err:
        raise _from_os_error(err, path, name) from err


def _xattr_set(path: str, name: str, value: str) -> None:
    try:
        os.setxattr(path, name, _encode(value))
    except OSError as err:
        raise _from_os_error(err, path, name) from err


def _xattr_remove(path: str, name: str) -> None:
    try:
        os.removexattr(path, name)
    except OSError as err:
        raise _from_os_error(err, path, name) from err


def _ads_path(path: str, name: str) -> str:
    return f"{path}:{name}"


def _ads_get(path: str, name: str) -> str:
    if not os.path.exists(path):
        raise XtagError(ErrorType.INVALID_ARGUMENT, f"Nonexistent path: '{path}'")
    ads = _ads_path(path, name)
    try:
        with open(ads, "rb") as stream:
            return _decode(stream.read())
    except OSError as err:
        raise XtagError(ErrorType.NO_DATA, f"Failed to read ADS: '{ads}'") from err


def _ads_set(path: str, name: str, value: str) -> None:
    ads = _ads_path(path, name)
    try:
        with open(ads, "wb") as stream:
            stream.write(_encode(value))
    except OSError as err:
        raise XtagError(ErrorType.IO_ERROR, f"Failed to write ADS: '{ads}'") from err


def _ads_remove(path: str, name: str) -> None:
    ads = _ads_path(path, name)
    if not os.path.exists(ads):
        return
    try:
        os.remove(ads)
    except OSError as err:
        raise XtagError(ErrorType.IO_ERROR, f"Failed to delete ADS: '{ads}'") from err


def get(path: str | os.PathLike[str], name: str) -> str:
    """Return the value of attribute ``name`` on ``path``."""
    validate_inputs(path, name)
    path = os.fspath(path)
    return _xattr_get(path, name) if _USE_XATTR else _ads_get(path, name)


def set(path: str | os.PathLike[str], name: str, value: str) -> None:  # noqa: A001
    """Set attribute ``name`` on ``path`` to ``value``."""
    validate_inputs(path, name)
    path = os.fspath(path)
    if _USE_XATTR:
        _xattr_set(path, name, value)
    else:
        _ads_set(path, name, value)


def remove(path: str | os.PathLike[str], name: str) -> None:
    """Remove attribute ``name`` from ``path``."""
    validate_inputs(path, name)
    path = os.fspath(path)
    if _USE_XATTR:
        _xattr_remove(path, name)
    else:
        _ads_remove(path, name)