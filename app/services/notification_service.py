"""
app/services/notification_service.py

Purpose: Login notification emails

- Renders the "new login detected" email
- Posts it to a transactional email relay over HTTP
- Simulates delivery when the relay is not configured
- Never lets a delivery failure block a login
"""

import httpx
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from app.core.config import settings
from app.core.logging import get_logger
from utils.constants import (
    LOGIN_NOTIFICATION_HTML,
    MSG_NOTIFICATION_FAILED,
    MSG_NOTIFICATION_SENT,
    MSG_NOTIFICATION_SIMULATED,
    SUBJECT_ADMIN_LOGIN,
    SUBJECT_USER_LOGIN,
)
from utils.validation_utils import sanitize_input

logger = get_logger(__name__)


class NotificationService:
    """Service for sending login notification emails via an HTTP relay"""

    def __init__(self):
        self.api_url = settings.EMAIL_API_URL
        self.api_key = settings.EMAIL_API_KEY
        self.from_email = settings.EMAIL_FROM
        self.from_name = settings.EMAIL_FROM_NAME
        self.timeout = settings.EMAIL_TIMEOUT

    def is_configured(self) -> bool:
        """Check if the email relay is configured"""
        return bool(self.api_url and self.api_key)

    def build_details(
        self,
        email: str,
        client_ip: Optional[str],
        timestamp: Optional[str] = None,
        device_type: Optional[str] = None,
        browser: Optional[str] = None,
        ip_address: Optional[str] = None,
        location: Optional[str] = None,
        login_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Fills unknown login details with their display defaults."""
        return {
            "email": email,
            "timestamp": timestamp or datetime.now(timezone.utc).isoformat(),
            "deviceType": device_type or "Unknown",
            "browser": browser or "Unknown",
            "ipAddress": ip_address or client_ip or "Unknown",
            "location": location or "Unknown",
            "loginType": login_type or "user",
        }

    def render(self, details: Dict[str, Any]) -> Dict[str, str]:
        is_admin = details["loginType"] == "admin"
        html = LOGIN_NOTIFICATION_HTML.format(
            heading="Admin Login Detected" if is_admin else "New Login Detected",
            account="Medicover Admin" if is_admin else "Medicover",
            timestamp=sanitize_input(details["timestamp"]),
            device_type=sanitize_input(details["deviceType"]),
            browser=sanitize_input(details["browser"]),
            ip_address=sanitize_input(details["ipAddress"]),
            location=sanitize_input(details["location"]),
        )
        return {
            "subject": SUBJECT_ADMIN_LOGIN if is_admin else SUBJECT_USER_LOGIN,
            "html": html,
        }

    async def send_login_notification(self, details: Dict[str, Any]) -> Dict[str, Any]:
        """
        Sends the notification, or simulates it.

        Returns:
            {
                "success": True,
                "message": "...",
                "simulated": True/False,
                "data" or "error": optional
            }
        """
        email = details["email"]

        if not self.is_configured():
            logger.info("Email not configured, simulating login notification", extra={"email": email})
            return {
                "success": True,
                "message": MSG_NOTIFICATION_SIMULATED,
                "simulated": True,
                "data": details,
            }

        content = self.render(details)
        payload = {
            "from": {"email": self.from_email, "name": self.from_name},
            "to": [{"email": email}],
            "subject": content["subject"],
            "html": content["html"],
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout
                )
                response.raise_for_status()

            logger.info(
                f"Login notification sent ({details['loginType']})",
                extra={"email": email}
            )
            return {"success": True, "message": MSG_NOTIFICATION_SENT, "simulated": False}

        except httpx.TimeoutException:
            logger.error("Email relay timeout", extra={"email": email})
            return {
                "success": True,
                "message": MSG_NOTIFICATION_FAILED,
                "simulated": True,
                "error": "Email relay timeout",
            }
        except httpx.HTTPError as e:
            logger.error(f"Error sending login notification: {e}", extra={"email": email})
            return {
                "success": True,
                "message": MSG_NOTIFICATION_FAILED,
                "simulated": True,
                "error": str(e),
            }


# Singleton instance
notification_service = NotificationService()
