"""
Use Cases

Organized into domain folders:
- auth/: Admin login
- invite_codes/: Invite code lifecycle and emails
- waitlist/: Waitlist maintenance
- dashboard/: Aggregate stats
"""
