import gzip
from dataclasses import dataclass

import zstandard as zstd


@dataclass
class SizeReport:
    raw_bytes: int
    gzip_bytes: int
    zstd_bytes: int
    huff_bytes: int
    tree_bytes: int

    @property
    def huff_ratio(self) -> float:
        return self.raw_bytes / max(1, self.huff_bytes + self.tree_bytes)

    @property
    def gzip_ratio(self) -> float:
        return self.raw_bytes / max(1, self.gzip_bytes)

    @property
    def zstd_ratio(self) -> float:
        return self.raw_bytes / max(1, self.zstd_bytes)


def gzip_compress(data: bytes) -> bytes:
    return gzip.compress(data, compresslevel=9)


def zstd_compress(data: bytes, level: int = 10) -> bytes:
    c = zstd.ZstdCompressor(level=level)
    return c.compress(data)
