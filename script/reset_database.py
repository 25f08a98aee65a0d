#!/usr/bin/env python3
"""
Database Reset Script
Reset the database schema

Features:
1. Downgrade to base - drop every table managed by alembic
2. Upgrade to head - create the latest schema

Notes:
- This script only resets database structure, does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

from alembic import command
from alembic.config import Config

from src.platform.config.core_setting import settings
from src.platform.constant.path import ALEMBIC_INI


def main() -> int:
    print('🔄 Resetting database...')
    print(f'   Target: {settings.DATABASE_URL_SYNC.rsplit("@", 1)[-1]}')

    alembic_config = Config(str(ALEMBIC_INI))
    try:
        command.downgrade(alembic_config, 'base')
        print('   ✅ Schema dropped')

        command.upgrade(alembic_config, 'head')
        print('   ✅ Migrations applied')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        return 1

    print('✅ Database reset completed!')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
