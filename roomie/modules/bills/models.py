# Supabase table: bills
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

bills:
- id: uuid (primary key)
- title: text (not null)
- amount: numeric(12, 2) (not null, check amount >= 0)
- category: text (not null, default: 'Other')
- paid_by: uuid (foreign key to roommates.id, not null)
- split_between: uuid[] (not null, check cardinality(split_between) > 0)
- date: date (not null)
- settled: boolean (not null, default: false)
- created_at: timestamp (default: now())
"""
