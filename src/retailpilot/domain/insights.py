"""AI-backed insights: business-health narrative and receipt extraction.

The generative model sits behind ``InsightProvider``. This module builds the
prompts, interprets the replies, and turns failures into either a fallback
message (narrative) or an ExternalServiceError (receipt extraction).
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, time, UTC
from decimal import Decimal
from typing import Any, Optional

from retailpilot.domain.entities import (
    BusinessSnapshot,
    ExpenseDraft,
    PaymentMode,
    ReceiptData,
)
from retailpilot.domain.errors import ExternalServiceError, ValidationError
from retailpilot.utils.amount_parser import parse_amount
from retailpilot.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

STORE_NAME = "RetailPilot Store"
NO_INSIGHT_MESSAGE = "Unable to generate insights at this time."
INSIGHTS_UNAVAILABLE_MESSAGE = (
    "AI Insights are currently unavailable. Please check your network or API key."
)
RECEIPT_RETRY_MESSAGE = "Could not extract data from image. Please try a clearer image."

RECEIPT_PROMPT = """Analyze this receipt image. Extract the following information in JSON format:
1. Merchant Name ("merchant")
2. Date ("date", YYYY-MM-DD format if possible, otherwise as appears)
3. Total Amount ("total", number only)
4. List of main items purchased ("items", array of strings)

Return strictly JSON."""


class InsightProvider(ABC):
    """Abstract generative-AI collaborator."""

    @abstractmethod
    def generate_text(self, prompt: str, image: Optional[bytes] = None) -> str:
        """Send a prompt, optionally with an image, and return the reply text.

        Implementations may raise any exception on failure.
        """
        pass


def build_business_prompt(snapshot: BusinessSnapshot) -> str:
    """Render the analyst prompt for a business snapshot."""
    low_stock = ", ".join(snapshot.low_stock_item_names) or "None"
    return (
        f'Act as a senior retail business analyst. Analyze the following summary data for "{STORE_NAME}".\n'
        "\n"
        "Data Summary:\n"
        f"- Total Revenue (Current Period): ${snapshot.revenue_total}\n"
        f"- Total Expenses: ${snapshot.expense_total}\n"
        f"- Net Profit: ${snapshot.net_profit}\n"
        f"- Sales Count: {snapshot.sale_count}\n"
        f"- Critical Low Stock Items: {low_stock}\n"
        "\n"
        "Provide a concise, 3-bullet point executive summary of the business health.\n"
        "Focus on actionable advice regarding cashflow and inventory.\n"
        "Keep it professional and encouraging."
    )


def parse_receipt_reply(text: str) -> ReceiptData:
    """Interpret a model reply as receipt fields.

    Accepts the JSON object on its own or wrapped in a Markdown code fence.

    Raises:
        ExternalServiceError: If the reply is empty, not JSON, or lacks a usable total
    """
    if not text or not text.strip():
        raise ExternalServiceError("No response from receipt extraction service")

    body = text.strip()
    if body.startswith("```"):
        body = body.strip("`")
        if body.lower().startswith("json"):
            body = body[4:]

    try:
        payload: Any = json.loads(body)
    except json.JSONDecodeError as e:
        raise ExternalServiceError(f"Receipt extraction returned unparsable content: {e}")
    if not isinstance(payload, dict):
        raise ExternalServiceError("Receipt extraction returned unparsable content")

    total = payload.get("total")
    if total is None:
        raise ExternalServiceError("Receipt extraction did not find a total")
    try:
        amount = parse_amount(total) if isinstance(total, str) else Decimal(str(total))
    except (ValueError, ArithmeticError):
        raise ExternalServiceError(f"Receipt extraction returned an invalid total '{total}'")

    items = payload.get("items") or []
    if not isinstance(items, list):
        items = [items]

    return ReceiptData(
        merchant=str(payload.get("merchant") or "Unknown merchant"),
        date=str(payload.get("date") or ""),
        total=amount,
        line_items=tuple(str(item) for item in items),
    )


class InsightsService:
    """Service wrapping the AI provider with local recovery."""

    def __init__(self, provider: Optional[InsightProvider]):
        """Initialize insights service.

        Args:
            provider: AI provider, or None when no provider is configured
        """
        self.provider = provider

    def summarize_business_health(self, snapshot: BusinessSnapshot) -> str:
        """Ask the provider for a short narrative about the business.

        Never raises: provider failures are logged and replaced with a
        user-facing fallback message.
        """
        if self.provider is None:
            return INSIGHTS_UNAVAILABLE_MESSAGE
        try:
            text = self.provider.generate_text(build_business_prompt(snapshot))
        except Exception:
            logger.exception("Business insight generation failed")
            return INSIGHTS_UNAVAILABLE_MESSAGE
        return text.strip() if text and text.strip() else NO_INSIGHT_MESSAGE

    def extract_receipt(self, image_bytes: bytes) -> ReceiptData:
        """Extract merchant, date, total and items from a receipt image.

        Raises:
            ValidationError: If no image data is given
            ExternalServiceError: If the provider fails or its reply is unusable
        """
        if not image_bytes:
            raise ValidationError("Receipt image is empty")
        if self.provider is None:
            raise ExternalServiceError("Receipt extraction service is not configured")
        try:
            text = self.provider.generate_text(RECEIPT_PROMPT, image=image_bytes)
        except Exception as e:
            logger.error("Receipt extraction failed: %s", e)
            raise ExternalServiceError(RECEIPT_RETRY_MESSAGE) from e
        try:
            return parse_receipt_reply(text)
        except ExternalServiceError as e:
            logger.error("Receipt extraction failed: %s", e)
            raise

    def expense_from_receipt(
        self,
        receipt: ReceiptData,
        as_of: Optional[datetime] = None,
        receipt_ref: Optional[str] = None,
    ) -> ExpenseDraft:
        """Turn extracted receipt fields into an expense draft.

        The receipt date is used when it parses; otherwise ``as_of``.
        """
        if as_of is None:
            as_of = datetime.now(UTC)

        expense_date = as_of
        if receipt.date:
            try:
                parsed: date = parse_date(receipt.date, today=as_of.date())
                expense_date = datetime.combine(parsed, time.min, tzinfo=as_of.tzinfo)
            except ValueError:
                logger.warning("Could not parse receipt date '%s', using %s", receipt.date, as_of)

        description = f"Auto-scan: {receipt.merchant}"
        if receipt.line_items:
            description = f"{description} - {', '.join(receipt.line_items)}"

        return ExpenseDraft(
            description=description,
            amount=receipt.total,
            date=expense_date,
            category="Operational",
            payment_mode=PaymentMode.CARD,
            receipt_ref=receipt_ref,
        )
