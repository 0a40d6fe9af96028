from .dtos import (
    SubmitApplicationRequest,
    ApplicationDTO,
    ApproveApplicationResponseDTO,
    ListApplicationsResponseDTO,
)
from .submit_application_use_case import SubmitApplicationUseCase
from .approve_application_use_case import ApproveApplicationUseCase
from .reject_application_use_case import RejectApplicationUseCase
from .withdraw_application_use_case import WithdrawApplicationUseCase
from .acknowledge_application_use_case import AcknowledgeApplicationUseCase
from .list_applications_use_case import (
    ListProjectApplicationsUseCase,
    ListMyApplicationsUseCase,
)

__all__ = [
    "SubmitApplicationRequest",
    "ApplicationDTO",
    "ApproveApplicationResponseDTO",
    "ListApplicationsResponseDTO",
    "SubmitApplicationUseCase",
    "ApproveApplicationUseCase",
    "RejectApplicationUseCase",
    "WithdrawApplicationUseCase",
    "AcknowledgeApplicationUseCase",
    "ListProjectApplicationsUseCase",
    "ListMyApplicationsUseCase",
]
