
class NoFileUploaded(Exception):
    def __init__(self):
        super().__init__("No file was uploaded.")


class UploadFormError(Exception):
    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code


class FileTooLarge(UploadFormError):
    def __init__(self):
        super().__init__("File too large", "LIMIT_FILE_SIZE")


class FailedToSaveFile(Exception):
    def __init__(self, filename: str):
        super().__init__(f"Failed to save uploaded file {filename}")


class StoredFileNotFound(Exception):
    def __init__(self, filename: str):
        super().__init__(f"File {filename} not found.")
