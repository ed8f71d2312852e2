from django.conf import settings
from django.core.checks import Tags, Warning, register

from deployment.services.static_root import inspect_static_root


@register(Tags.staticfiles)
def check_static_root_writable(app_configs, **kwargs):
    status = inspect_static_root(settings.STATIC_ROOT)
    if status.writable:
        return []
    return [
        Warning(
            f"STATIC_ROOT {status.path} is not writable; collectstatic will fail.",
            hint=(
                "Point the STATIC_ROOT environment variable at a writable "
                "directory, e.g. /var/lib/beiwe/static."
            ),
            id='deployment.W001',
        )
    ]
