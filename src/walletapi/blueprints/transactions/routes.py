"""Transaction creation, filtered listing and total endpoints."""

from __future__ import annotations

from flask import jsonify, request

from ...extensions import get_context
from ...logging_config import get_logger
from ...services import transactions as transaction_service
from . import bp
from .forms import CreateTransactionRequest, TransactionQueryParams

logger = get_logger(__name__)


def _filters_from_request():
    params = TransactionQueryParams.model_validate(request.args.to_dict())
    filters = params.to_filters()
    logger.debug("Transaction filters parsed", extra={"filters": sorted(filters.present())})
    return filters


@bp.post("")
def create_transaction():
    """Record an expense or income for an existing user."""

    payload = CreateTransactionRequest.model_validate(request.get_json(silent=True) or {})
    kind = payload.kind()
    category = payload.parsed_category()

    ctx = get_context()
    transaction_service.create_transaction(
        ctx.transaction_repo,
        ctx.user_repo,
        user_email=payload.user_email,
        kind=kind,
        amount=payload.amount,
        category=category,
        description=payload.description,
    )
    return jsonify({"message": "Transaction created successfully"})


@bp.get("")
def list_transactions():
    """Return transactions matching the query-string filters."""

    filters = _filters_from_request()
    records = transaction_service.fetch_transactions(get_context().transaction_repo, filters)
    return jsonify(
        {
            "message": "Transactions retrieved successfully",
            "transactions": [record.projection() for record in records],
        }
    )


@bp.get("/amount")
def transactions_amount():
    """Return the signed total of a user's matching transactions."""

    filters = _filters_from_request()
    total = transaction_service.sum_transactions(get_context().transaction_repo, filters)
    return jsonify({"message": "Transactions sum retrieved successfully", "amount": str(total)})
