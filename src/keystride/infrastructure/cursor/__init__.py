from ._buffer_cursor import BufferCursor

__all__ = [BufferCursor.__name__]
