from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from deployment.services.serving import verify_static_serving
from deployment.services.static_root import collected_files


class Command(BaseCommand):
    help = "Request every collected static file through the public URL and report 404s."

    def add_arguments(self, parser):
        parser.add_argument('--base-url', required=True)
        parser.add_argument('--limit', type=int, default=None)
        parser.add_argument('--timeout', type=float, default=10)

    def handle(self, *args, **options):
        files = collected_files(settings.STATIC_ROOT)
        if not files:
            raise CommandError(
                f"Nothing collected under {settings.STATIC_ROOT}; run collectstatic first."
            )
        limit = options['limit']
        if limit is not None:
            if limit < 1:
                raise CommandError(f"--limit must be at least 1, got {limit}.")
            files = files[:limit]

        failures = verify_static_serving(
            options['base_url'],
            settings.STATIC_URL,
            files,
            timeout=options['timeout'],
        )
        for failure in failures:
            reason = failure.status_code if failure.status_code is not None else failure.error
            self.stderr.write(f"[!] {failure.url} - {reason}")

        if failures:
            raise CommandError(f"{len(failures)} of {len(files)} static files were not served.")

        self.stdout.write(self.style.SUCCESS(f'Static serving OK: {len(files)} files checked'))
