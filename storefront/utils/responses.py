# storefront/utils/responses.py
from typing import List

from fastapi import HTTPException, status

from storefront.errors import ErrorCode, ValidationIssue

# HTTP status used when an action returns issues of the given code
STATUS_BY_CODE = {
    ErrorCode.INCOMPLETE_SELECTION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_CART: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INCOMPLETE_CUSTOMER_INFO: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.UNKNOWN_PRODUCT: status.HTTP_404_NOT_FOUND,
}


def raise_for_issues(issues: List[ValidationIssue]) -> None:
    # Turn returned issues into an HTTP error; the first issue decides the status
    if not issues:
        return
    raise HTTPException(
        status_code=STATUS_BY_CODE[issues[0].code],
        detail=[issue.model_dump(mode="json") for issue in issues],
    )
