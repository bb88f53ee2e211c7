#!/usr/bin/env python3
"""
Create a tenant from a source checkout: python scripts/create_tenant.py
Requires DATABASE_URL (env or .env).
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tenantkit.cli.create_tenant import run


if __name__ == "__main__":
    run()
