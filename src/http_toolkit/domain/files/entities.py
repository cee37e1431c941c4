from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    new_file_name: str
    original_file_name: str
    file_size: int
