# Supabase table: roommates
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

roommates:
- id: uuid (primary key)
- name: text (not null)
- email: text (unique, not null)
- color: text (not null) - display color tag, e.g. 'bg-blue-500'
- user_id: uuid (foreign key to auth.users.id, nullable) - set once the roommate has an account
- status: text (nullable) - values: invited, registered
- invited_by: uuid (foreign key to auth.users.id, nullable)
- group_id: uuid (foreign key to groups.id, nullable, on delete set null)
- created_at: timestamp (default: now())

Removing a roommate also removes the bills they paid or share and the chores
assigned to them (done by RoommateService.remove_roommate).
"""
