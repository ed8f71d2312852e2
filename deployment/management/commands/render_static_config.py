from django.conf import settings
from django.core.management.base import BaseCommand

from deployment.services.snippets import render_nginx_location, render_nixos_module


class Command(BaseCommand):
    help = "Print the Nginx or NixOS configuration that serves STATIC_ROOT under STATIC_URL."

    def add_arguments(self, parser):
        parser.add_argument('--format', choices=['nginx', 'nixos'], default='nginx')
        parser.add_argument('--server-name', default='localhost')
        parser.add_argument('--service', default='beiwe')

    def handle(self, *args, **options):
        if options['format'] == 'nixos':
            snippet = render_nixos_module(
                settings.STATIC_ROOT,
                settings.STATIC_URL,
                options['server_name'],
                service=options['service'],
            )
        else:
            snippet = render_nginx_location(settings.STATIC_URL, settings.STATIC_ROOT)
        self.stdout.write(snippet, ending='')
