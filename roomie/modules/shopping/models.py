# Supabase table: shopping_items
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

shopping_items:
- id: uuid (primary key)
- item: text (not null)
- added_by: uuid (foreign key to roommates.id, not null)
- date_added: date (not null)
- purchased: boolean (not null, default: false)
- purchased_by: uuid (foreign key to roommates.id, nullable) - set iff purchased
- purchased_date: date (nullable) - set iff purchased
- created_at: timestamp (default: now())
"""
