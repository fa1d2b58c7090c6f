"""Builder da requisição de URL de upload."""

from __future__ import annotations

from api.payload_builders.liveperson.base import UmsRequest
from app.constants.liveperson import HostedFileType, UmsRequestType


def build_request_upload_url_event(file_size: int, file_type: HostedFileType | str) -> UmsRequest:
    """Constrói GenerateURLForUploadFile.

    Args:
        file_size: Tamanho em bytes
        file_type: PNG, JPG ou GIF

    Raises:
        ValueError: Se tamanho não positivo ou tipo não suportado.
    """
    if file_size <= 0:
        raise ValueError("file_size deve ser > 0")
    return UmsRequest(
        type=UmsRequestType.GENERATE_UPLOAD_URL,
        body={
            "fileSize": file_size,
            "fileType": str(HostedFileType(file_type.upper())),
        },
    )
