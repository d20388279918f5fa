# praiativa/api/v1/errors.py
from fastapi import HTTPException, status

from praiativa.core.results import Failure, FailureKind

_STATUS = {
    FailureKind.MISSING_DATES: status.HTTP_400_BAD_REQUEST,
    FailureKind.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    FailureKind.MISSING_PRICE: status.HTTP_400_BAD_REQUEST,
    FailureKind.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    FailureKind.CHECKOUT_FAILED: status.HTTP_502_BAD_GATEWAY,
}

# mensagem curta para o usuário; o detalhe do provedor fica só no log
_USER_MESSAGE = {
    FailureKind.CHECKOUT_FAILED: "Erro ao gerar cobrança",
}


def http_error(failure: Failure) -> HTTPException:
    return HTTPException(
        status_code=_STATUS.get(failure.kind, status.HTTP_400_BAD_REQUEST),
        detail={
            "code": failure.kind.value,
            "message": _USER_MESSAGE.get(failure.kind, failure.message),
        },
    )
