"""
Sink adapter: binds writable destinations into the pair the writer uses.

A Sink has exactly one error-class destination (`err`) and one
info-class destination (`out`). They may be the same object. Writing is
a single call followed by a flush; nothing is buffered or retried, and a
failing destination surfaces as SinkWriteFailure.

Usage::

    sink = console_sink()                  # sys.stdout / sys.stderr
    sink = stream_sink(buf)                # one stream for both roles
    sink = stream_sink((out_buf, err_buf))
    with FileSink(('run.log', 'run.err')) as sink:
        ...
"""

import io
import logging
import sys
from pathlib import Path

from .errors import SinkWriteFailure
from .levels import ERROR_CLASS, TRACE_CLASS

_log = logging.getLogger(__name__)


class _LazyStream:
    """Writable that resolves its target from the sys module per write.

    Keeps console output following sys.stdout/sys.stderr after they are
    replaced, e.g. by pytest capture or contextlib.redirect_stdout.
    """

    def __init__(self, stream_attr: str):
        self._stream_attr = stream_attr  # "stdout" or "stderr"

    @property
    def stream(self):
        return getattr(sys, self._stream_attr)

    def write(self, text):
        return self.stream.write(text)

    def flush(self):
        self.stream.flush()

    def __repr__(self):
        return f"<sys.{self._stream_attr}>"


def _is_binary(stream) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, 'mode', '')
    return isinstance(mode, str) and 'b' in mode


class Sink:
    """A pair of destinations: `out` for info-class, `err` for error-class."""

    def __init__(self, out, err=None):
        self.out = out
        self.err = out if err is None else err

    def destination(self, sink_class: str):
        """Destination for a channel's sink class."""
        if sink_class in (ERROR_CLASS, TRACE_CLASS):
            return self.err
        return self.out

    def write(self, sink_class: str, text: str) -> None:
        """Write text to the destination for sink_class and flush it."""
        stream = self.destination(sink_class)
        data = text.encode('utf-8') if _is_binary(stream) else text
        try:
            stream.write(data)
            flush = getattr(stream, 'flush', None)
            if flush is not None:
                flush()
        except (OSError, ValueError) as e:
            raise SinkWriteFailure(sink_class, e) from e

    def __repr__(self):
        return f"{type(self).__name__}(out={self.out!r}, err={self.err!r})"


def console_sink() -> Sink:
    """Sink bound to the process's standard output and standard error."""
    return Sink(_LazyStream('stdout'), _LazyStream('stderr'))


def stream_sink(streams) -> Sink:
    """Bind one stream, or an (out, err) pair of streams, into a Sink.

    Raises:
        TypeError: If streams is neither writable nor a pair of writables.
    """
    if isinstance(streams, (tuple, list)):
        if len(streams) != 2:
            raise TypeError(
                f"Expected a stream or an (out, err) pair, got {len(streams)} items"
            )
        out, err = streams
    else:
        out = err = streams
    for s in (out, err):
        if not callable(getattr(s, 'write', None)):
            raise TypeError(f"Not a writable stream: {s!r}")
    return Sink(out, err)


class FileSink(Sink):
    """Sink writing to one log file, or an (out, err) pair of files.

    Files are opened in append mode at construction and stay open until
    close(). The logger writing through this sink never closes it.
    """

    def __init__(self, filename):
        if isinstance(filename, (tuple, list)):
            if len(filename) != 2:
                raise TypeError(
                    f"Expected a path or an (out, err) pair, got {len(filename)} items"
                )
            paths = [Path(p).resolve() for p in filename]
        else:
            paths = [Path(filename).resolve()]
        self.paths = tuple(paths)
        handles = []
        try:
            for path in paths:
                handles.append(open(path, 'a', encoding='utf-8'))
                _log.debug("Opened log file %s", path)
        except OSError:
            for h in handles:
                h.close()
            raise
        super().__init__(*handles)

    @property
    def closed(self) -> bool:
        return self.out.closed and self.err.closed

    def close(self) -> None:
        """Close the underlying file handles."""
        for handle in {id(self.out): self.out, id(self.err): self.err}.values():
            if not handle.closed:
                handle.close()
                _log.debug("Closed log file %s", handle.name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
