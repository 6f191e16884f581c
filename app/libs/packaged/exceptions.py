class PackagedError(Exception):
    detail: str = "Request could not be completed."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.detail
        super().__init__(self.detail)


# =============================================================================
# Raised synchronously, while building or dispatching
# =============================================================================
class UnknownMethodError(PackagedError, ValueError):
    detail = "Unknown request method."

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown request method «{name}».")


class MalformedTargetError(PackagedError, ValueError):
    detail = "Malformed target URL."

    def __init__(self, target: object, reason: str | None = None):
        self.target = target
        message = f"Couldn't parse «{target}» to a URL."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


# =============================================================================
# Raised from the background fetch, through the returned future
# =============================================================================
class FetchError(PackagedError):
    detail = "Transport failure while fetching."
