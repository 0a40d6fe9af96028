from libs.result import Error


def status_changed_concurrently() -> Error:
    return Error(
        code="INVALID_TRANSITION",
        message="Application status was changed by another request",
    )
