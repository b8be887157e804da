# Supabase table: announcements
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

announcements:
- id: uuid (primary key)
- title: text (not null)
- content: text (not null)
- created_by: uuid (foreign key to auth.users.id, not null)
- group_id: uuid (foreign key to groups.id, nullable) - null means all roommates
- due_date: timestamptz (nullable) - expiry; expired rows are kept but not listed
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
