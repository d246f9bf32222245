"""Phantom state tracking.

``Socket[S]`` carries its connection state as a type parameter only:
``Created`` and ``Connected`` are marker classes with no instances. Type
checkers reject ``read_socket`` on a ``Socket[Created]``. The socket also
keeps its address at runtime, so misuse that slips past the type checker
raises :class:`SocketStateError` instead of reading garbage.

Paths use distinct classes instead: only directories offer ``dir()`` and
``file()``, so a child can never be created under a file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar


class Created:
    """Marker: socket exists but is not connected."""


class Connected:
    """Marker: socket is connected to an address."""


S = TypeVar("S", Created, Connected)


class SocketStateError(RuntimeError):
    """Socket used in a state its phantom type forbids."""


class Socket(Generic[S]):
    """In-memory loopback socket.

    Instances come from :func:`create_socket` and :func:`connect_socket`
    only.
    """

    __slots__ = ("_address", "_inbox")

    def __init__(self, address: str | None, inbox: bytes) -> None:
        self._address = address
        self._inbox = inbox

    @property
    def address(self) -> str | None:
        return self._address

    def __repr__(self) -> str:
        state = "created" if self._address is None else "connected"
        return f"Socket({state}, address={self._address!r})"


def create_socket() -> Socket[Created]:
    return Socket(None, b"")


def connect_socket(
    address: str,
    socket: Socket[Created],
    payload: bytes = b"",
) -> Socket[Connected]:
    """Connect *socket*; *payload* is what the peer will have sent."""
    if socket.address is not None:
        raise SocketStateError(f"Socket already connected to {socket.address}")
    return Socket(address, payload)


def read_socket(socket: Socket[Connected]) -> bytes:
    if socket.address is None:
        raise SocketStateError("Cannot read from an unconnected socket")
    return socket._inbox


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Directory:
    """A directory path. The root has no parent and an empty name."""

    parent: Directory | None = None
    name: str = ""

    def dir(self, name: str) -> Directory:
        return Directory(parent=self, name=name)

    def file(self, name: str) -> File:
        return File(parent=self, name=name)

    @property
    def parts(self) -> tuple[str, ...]:
        if self.parent is None:
            return ()
        return (*self.parent.parts, self.name)

    def __str__(self) -> str:
        return "/" + "/".join(self.parts)


@dataclass(frozen=True)
class File:
    parent: Directory
    name: str

    @property
    def parts(self) -> tuple[str, ...]:
        return (*self.parent.parts, self.name)

    def __str__(self) -> str:
        return "/" + "/".join(self.parts)


ROOT = Directory()

Path = Directory | File


def read_file(path: File, contents: Mapping[str, str]) -> str | None:
    """Read *path* from an in-memory tree keyed by rendered path."""
    return contents.get(str(path))


def list_directory(path: Directory, tree: Mapping[str, list[Path]]) -> list[Path]:
    """List children of *path* from an in-memory tree keyed by rendered path."""
    return list(tree.get(str(path), []))
