import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

import settings

logger = logging.getLogger("dailyverse.email")


def smtp_configured() -> bool:
    return bool(
        settings.SMTP_HOST and settings.SMTP_USERNAME and settings.SMTP_PASSWORD
    )


def _send_email(subject: str, html: str, text: str, to_email: str) -> bool:
    if settings.TESTING_MODE or not smtp_configured():
        # Skip sending in tests or when SMTP is not configured
        logger.info(
            f"[Email skipped] To={to_email} Subject={subject} TESTING_MODE={settings.TESTING_MODE} SMTP_CONFIGURED={smtp_configured()}"
        )
        return False

    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = formataddr((settings.SMTP_FROM_NAME, settings.SMTP_FROM_EMAIL))
    msg["To"] = to_email
    msg.attach(MIMEText(text, "plain", "utf-8"))
    msg.attach(MIMEText(html, "html", "utf-8"))

    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=20) as server:
            if settings.SMTP_USE_TLS:
                server.starttls()
            server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
            server.send_message(msg)
        logger.info(f"Email sent to {to_email}: {subject}")
        return True
    except (smtplib.SMTPException, OSError) as e:  # pragma: no cover
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False


def _base_styles() -> str:
    return (
        "body{margin:0;padding:0;background:#f4f1ea;color:#2b2a28;font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Cantarell,Noto Sans,sans-serif}"
        ".wrapper{max-width:560px;margin:0 auto;padding:24px}"
        ".card{background:#fffdf8;border:1px solid #e6dfd0;border-radius:12px;overflow:hidden}"
        ".brand{padding:20px 20px 0;font-size:18px;font-weight:700;letter-spacing:0.4px}"
        ".content{padding:16px 20px 24px;font-size:15px;line-height:1.6}"
        ".code{display:inline-block;font-size:28px;font-weight:700;letter-spacing:6px;padding:8px 16px;border-radius:8px;background:#efe8d8}"
        ".muted{color:#7d776b;font-size:12px;margin-top:16px}"
    )


def _render_shell(inner_html: str) -> str:
    return f"""
<!doctype html>
<html>
  <head>
    <meta name=\"viewport\" content=\"width=device-width,initial-scale=1\" />
    <meta http-equiv=\"Content-Type\" content=\"text/html; charset=UTF-8\" />
    <title>DailyVerse</title>
    <style>{_base_styles()}</style>
  </head>
  <body>
    <div class=\"wrapper\">
      <div class=\"card\">
        <div class=\"brand\">DailyVerse</div>
        <div class=\"content\">{inner_html}</div>
      </div>
    </div>
  </body>
</html>
"""


def _send_code(subject: str, intro: str, otp: str, ttl_minutes: int, to_email: str):
    inner = (
        f"<p>{intro}</p>"
        f'<p><span class="code">{otp}</span></p>'
        f"<p>It will expire in {ttl_minutes} minutes.</p>"
        '<p class="muted">If you did not ask for this code you can ignore this email.</p>'
    )
    text = f"{intro} {otp}. It will expire in {ttl_minutes} minutes."
    return _send_email(subject, _render_shell(inner), text, to_email)


def send_verification_email(to_email: str, otp: str) -> bool:
    return _send_code(
        "Your Verification Code",
        "Your OTP for email verification is:",
        otp,
        settings.OTP_TTL_MINUTES,
        to_email,
    )


def send_password_reset_email(to_email: str, otp: str) -> bool:
    return _send_code(
        "Password Reset Request",
        "Your OTP for password reset is:",
        otp,
        settings.OTP_TTL_MINUTES,
        to_email,
    )
