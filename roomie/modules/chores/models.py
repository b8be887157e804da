# Supabase table: chores
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

chores:
- id: uuid (primary key)
- title: text (not null)
- description: text (not null, default: '')
- assigned_to: uuid (foreign key to roommates.id, not null)
- due_date: date (not null)
- completed: boolean (not null, default: false)
- completed_date: date (nullable) - set iff completed
- priority: text (not null, default: 'medium') - values: low, medium, high
- created_at: timestamp (default: now())
"""
