import logging

from fastapi import HTTPException, UploadFile


logger = logging.getLogger(__name__)


def check_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        raise HTTPException(status_code=413, detail=f"File too large. Maximum size is {max_bytes} bytes")


async def read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read an upload fully into memory, then release it"""
    if getattr(file, "size", None):
        check_size(file.size, max_bytes)

    try:
        # One byte past the limit is enough to know it is too large
        data = await file.read(max_bytes + 1)
    finally:
        await file.close()

    check_size(len(data), max_bytes)
    logger.debug("Read %d bytes from upload %r", len(data), file.filename)
    return data
