# Supabase table: groups
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

groups:
- id: uuid (primary key)
- name: text (not null)
- created_by: uuid (foreign key to auth.users.id, nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Membership is roommates.group_id. Deleting a group clears that column on its
members first; roommates are never deleted with their group.
"""
