"""
Email templates.
"""

from html import escape

OTP_SUBJECT = "Your DabotCentral Login Code"


def render_otp_email(code: str, ttl_minutes: int) -> str:
    """Render the HTML body of the login-code email."""
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2>Welcome to DabotCentral</h2>
  <p>Your login code is:</p>
  <div style="background-color: #f0f0f0; padding: 20px; text-align: center; border-radius: 8px; margin: 20px 0;">
    <h1 style="letter-spacing: 5px; margin: 0; font-size: 32px; color: #333;">{escape(code)}</h1>
  </div>
  <p style="color: #666; font-size: 14px;">This code expires in {ttl_minutes} minutes.</p>
  <p style="color: #999; font-size: 12px;">If you didn't request this code, you can safely ignore this email.</p>
</div>
"""
