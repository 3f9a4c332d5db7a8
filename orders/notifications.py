"""Delivery notification email.

Rendered from a Django template and sent through django.core.mail. Sending is
best-effort: send_delivery_email() reports failure by returning False.
"""

import logging
import smtplib

from django.conf import settings
from django.core.mail import BadHeaderError, send_mail
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string
from django.utils.formats import date_format

logger = logging.getLogger(__name__)


def delivery_email_context(order, download_url: str, price: str) -> dict:
    completed = order.completed_at
    return {
        "to_name": order.customer_name,
        "to_email": order.email,
        "from_name": settings.DRAWPIX_DELIVERY_FROM_NAME,
        "order_id": str(order.id),
        "service": order.service,
        "price": price,
        "download_link": download_url,
        "completion_date": date_format(completed, "SHORT_DATE_FORMAT") if completed else "",
    }


def send_delivery_email(order, download_url: str, price: str) -> bool:
    try:
        body = render_to_string(
            settings.DRAWPIX_DELIVERY_EMAIL_TEMPLATE,
            delivery_email_context(order, download_url, price),
        )
        send_mail(
            settings.DRAWPIX_DELIVERY_EMAIL_SUBJECT,
            body,
            settings.DEFAULT_FROM_EMAIL,
            [order.email],
            fail_silently=False,
        )
    except (TemplateDoesNotExist, TemplateSyntaxError, smtplib.SMTPException, BadHeaderError, OSError):
        logger.exception("Delivery email for order %s to %s failed.", order.id, order.email)
        return False
    logger.info("Delivery email for order %s sent to %s.", order.id, order.email)
    return True
