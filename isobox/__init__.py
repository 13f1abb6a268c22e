"""Binary stream readers, a generic box, and the AVC avcC box for ISO base media files."""

__version__ = "0.1.0"
__all__ = ["binary_stream", "box", "avcc"]