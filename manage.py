#!/usr/bin/env python
"""Django's command-line utility for administrative tasks.

DJANGO_SECRET_KEY must be set, in the environment or in a .env file in the
working directory, before any command runs. STATIC_ROOT is optional:

    DJANGO_SECRET_KEY=... STATIC_ROOT=/var/lib/beiwe/static ./manage.py collectstatic --noinput
"""
import os
import sys


def main():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.django_settings')
    from django.core.management import execute_from_command_line
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
