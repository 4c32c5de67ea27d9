"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt)
  • Signup / login validation
  • ``UserRepository`` and ``AuthService``
  • Signed session tokens carried in a cookie
  • Signup / login / logout / me API routes
"""
