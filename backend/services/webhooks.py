"""
Outbound purchase notifications.

Fire-and-forget : le payload est construit sur le thread de la requête (les
objets ORM sont encore attachés), puis POSTé depuis un pool de threads.
Rien n'est attendu, rejoué ni remonté à l'appelant ; chaque issue est
seulement loggée.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any

import requests

from backend.app.core.config import settings
from backend.app.db.models.models_v1 import Purchasing

logger = logging.getLogger(__name__)

EVENT_PURCHASE_CREATED = "purchase_created"

_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="webhook")


def build_purchase_payload(purchase: Purchasing) -> dict[str, Any]:
    return {
        "event": EVENT_PURCHASE_CREATED,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "order_id": purchase.id,
        "date": purchase.date.strftime("%Y-%m-%d"),
        "supplier": purchase.supplier.name,
        "user": purchase.user.username,
        "grand_total": purchase.grand_total,
        "items": [
            {
                "item_id": d.item_id,
                "item_name": d.item.name,
                "qty": d.qty,
                "price": d.item.price,
                "sub_total": d.sub_total,
            }
            for d in purchase.details
        ],
    }


def deliver(url: str, payload: dict[str, Any]) -> None:
    """POST d'un payload. Ne lève jamais."""
    order_id = payload.get("order_id")
    try:
        resp = requests.post(url, json=payload, timeout=settings.WEBHOOK_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        logger.warning("Failed to send webhook notification for order #%s: %s", order_id, exc)
        return

    if 200 <= resp.status_code < 300:
        logger.info("Webhook notification sent successfully for order #%s", order_id)
    else:
        logger.warning(
            "Webhook notification for order #%s failed with status: %s",
            order_id,
            resp.status_code,
        )


def notify_purchase_created(purchase: Purchasing) -> Future | None:
    """
    Schedule delivery of the purchase summary to WEBHOOK_URL.

    Returns the scheduled future (or None when nothing was scheduled); the
    purchase flow does not look at it.
    """
    url = settings.WEBHOOK_URL
    if not url:
        logger.info("Webhook URL not configured, skipping notification")
        return None

    try:
        payload = build_purchase_payload(purchase)
        return _executor.submit(deliver, url, payload)
    except Exception:
        # la commande est déjà commitée : un souci de notification ne doit pas remonter au client
        logger.exception("Could not schedule webhook notification for order #%s", purchase.id)
        return None
