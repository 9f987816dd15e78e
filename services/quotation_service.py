# -*- coding: utf-8 -*-
"""
Quotation Service - persists a submitted quotation.

Posts the flattened form to /quotations, then one /quotation_pieces record
per worktop piece. Pricing fields are left to the backend.
"""

import json
from datetime import datetime
from typing import Any, Dict, Optional

from app.config import Config
from services.api_client import ApiClient
from utils.logger import get_logger

logger = get_logger(__name__)


class QuotationService:
    """Sends submitted quotations to the backend."""

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()

    def submit_quotation(self, data: Dict[str, Any], quote_id: str,
                         token: Optional[str] = None) -> Optional[Any]:
        """
        Persist a quotation and its pieces.

        Args:
            data: flattened form data
            quote_id: reference shown to the customer (LUX-YYYY-MM-XXXXX)
            token: bearer token of the current session

        Returns:
            The backend id of the quotation record, if it reported one

        Raises:
            ApiException / NetworkException from the client
        """
        # None clears the header left by an earlier session
        self.client.set_access_token(token)

        payload = dict(data)
        payload.update({
            "quote_id": quote_id,
            "quote_data": json.dumps(data, default=str),
            "created_at": datetime.now().isoformat(),
        })

        result = self.client.post(Config.QUOTATIONS_ENDPOINT, payload)
        quotation_db_id = result.get("id") if isinstance(result, dict) else None
        logger.info(f"Quotation {quote_id} stored (id={quotation_db_id})")

        pieces = data.get("pieces") or {}
        if pieces and quotation_db_id is None:
            logger.warning(f"No id returned for {quote_id}, skipping {len(pieces)} piece record(s)")
            return None
        for piece_letter, piece in pieces.items():
            piece = piece or {}
            self.client.post(Config.QUOTATION_PIECES_ENDPOINT, {
                "quotation_id": quotation_db_id,
                "piece_letter": piece_letter,
                "length_mm": piece.get("length"),
                "width_mm": piece.get("width"),
                "thickness_mm": piece.get("thickness"),
            })
        if pieces:
            logger.debug(f"Stored {len(pieces)} piece(s) for {quote_id}")

        return quotation_db_id
