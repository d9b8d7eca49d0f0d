"""
utils/constants.py

Purpose: Centralized static content

- All user-facing response messages
- Demo catalogue data served by the /api listing endpoints
- Login notification email template

(Prevents hardcoding across the codebase)
"""

APP_NAME = "Medicover Healthcare API"
APP_VERSION = "1.0.0"

# ============================================================
# AUTH MESSAGES
# ============================================================

MSG_EMAIL_AND_PASSWORD_REQUIRED = "Email and password required"
MSG_PASSWORD_TOO_SHORT = "Password must be {length}+ characters"
MSG_USER_EXISTS = "User already exists"
MSG_INVALID_CREDENTIALS = "Invalid credentials"
MSG_NO_TOKEN = "No token provided"
MSG_USER_NOT_FOUND = "User not found"
MSG_EMAIL_IN_USE = "Email already in use"
MSG_EMAIL_REQUIRED = "Email is required"

MSG_REGISTERED = "Registered successfully"
MSG_LOGGED_IN = "Login successful"
MSG_PROFILE_UPDATED = "Profile updated successfully"
MSG_PASSWORD_RESET_SENT = "Password reset email sent (demo mode)"
MSG_LOGGED_OUT = "Logged out successfully"

# ============================================================
# LOGIN NOTIFICATIONS
# ============================================================

MSG_NOTIFICATION_SENT = "Login notification sent successfully"
MSG_NOTIFICATION_SIMULATED = "Login notification simulated (email not configured)"
MSG_NOTIFICATION_FAILED = "Login continued (email notification failed)"

SUBJECT_USER_LOGIN = "New Login Detected - Medicover"
SUBJECT_ADMIN_LOGIN = "Admin Login Detected - Medicover"

LOGIN_NOTIFICATION_HTML = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <div style="background: linear-gradient(135deg, #2563eb, #1d4ed8); padding: 30px; text-align: center; color: white;">
    <h1 style="margin: 0; font-size: 28px;">Medicover Healthcare</h1>
    <p style="margin: 5px 0 0 0; opacity: 0.9;">Security Notification</p>
  </div>
  <div style="padding: 30px;">
    <h2 style="color: #2563eb; margin-bottom: 20px;">{heading}</h2>
    <p>We detected a new login to your {account} account:</p>
    <div style="background: #f8fafc; padding: 20px; border-radius: 8px; margin: 20px 0; border-left: 4px solid #2563eb;">
      <p style="margin: 8px 0;"><strong>Time:</strong> {timestamp}</p>
      <p style="margin: 8px 0;"><strong>Device:</strong> {device_type}</p>
      <p style="margin: 8px 0;"><strong>Browser:</strong> {browser}</p>
      <p style="margin: 8px 0;"><strong>IP Address:</strong> {ip_address}</p>
      <p style="margin: 8px 0;"><strong>Location:</strong> {location}</p>
    </div>
    <p>If this was you, you can safely ignore this email.</p>
  </div>
</div>
"""

# ============================================================
# DEMO CATALOGUE
# ============================================================

SERVICES = [
    {"id": 1, "name": "Doctor at Home", "description": "Professional doctors at your doorstep", "icon": "🏠"},
    {"id": 2, "name": "Nursing Care", "description": "Qualified nursing services", "icon": "👩‍⚕️"},
    {"id": 3, "name": "Medicine Delivery", "description": "Fast medicine delivery", "icon": "💊"},
    {"id": 4, "name": "Lab Tests", "description": "Home sample collection", "icon": "🧪"},
    {"id": 5, "name": "Tele Consultation", "description": "Online doctor consultations", "icon": "📱"},
    {"id": 6, "name": "Health Attendant", "description": "Personal health assistants", "icon": "👨‍⚕️"},
]

DEMO_USERS = [
    {"id": 1, "name": "Demo User", "email": "user@demo.com", "role": "patient"},
    {"id": 2, "name": "Demo Doctor", "email": "doctor@demo.com", "role": "doctor"},
    {"id": 3, "name": "Admin Demo", "email": "admin@demo.com", "role": "admin"},
]

APPOINTMENTS = [
    {"id": 1, "patient": "John Doe", "doctor": "Dr. Smith", "date": "2024-01-15", "status": "confirmed"},
    {"id": 2, "patient": "Jane Smith", "doctor": "Dr. Johnson", "date": "2024-01-16", "status": "pending"},
]

CITIES = [
    "Mumbai", "Delhi", "Bangalore", "Hyderabad", "Chennai",
    "Kolkata", "Pune", "Ahmedabad", "Jaipur", "Lucknow",
]

TESTIMONIALS = [
    {"id": 1, "name": "Rajesh Kumar", "review": "Excellent service! Doctor arrived within 30 minutes.", "rating": 5},
    {"id": 2, "name": "Priya Sharma", "review": "Very professional nursing care for my mother.", "rating": 4},
    {"id": 3, "name": "Amit Patel", "review": "Medicine delivery was fast and reliable.", "rating": 5},
]

ENDPOINTS = [
    "GET  /api/health - Service status",
    "GET  /api/test - Test connection",
    "POST /api/auth/register - User registration",
    "POST /api/auth/login - User login",
    "GET  /api/auth/me - Get profile",
    "GET  /api/auth/profile - Get profile",
    "POST /api/auth/update-profile - Profile updates",
    "POST /api/auth/forgot-password - Password reset (demo)",
    "POST /api/auth/logout - Logout",
    "POST /api/auth/send-login-notification - Login alerts",
    "GET  /api/services - Medical services",
    "GET  /api/users - Users list",
    "GET  /api/appointments - Appointments",
    "GET  /api/cities - Available cities",
    "GET  /api/testimonials - Customer reviews",
]
