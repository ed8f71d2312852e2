"""
Reverse-proxy and NixOS configuration for the collected static files.

Nginx has to alias STATIC_URL to the same directory STATIC_ROOT resolves to,
otherwise every asset 404s. These helpers render that configuration from the
live settings so the two cannot drift apart.
"""
import os


def _with_slashes(url):
    return '/' + url.strip('/') + '/' if url.strip('/') else '/'


def _alias_path(static_root):
    return os.path.abspath(static_root).rstrip('/') + '/'


def render_nginx_location(static_url, static_root):
    return (
        f"location {_with_slashes(static_url)} {{\n"
        f"    alias {_alias_path(static_root)};\n"
        f"}}\n"
    )


def render_nixos_module(static_root, static_url, server_name, service='beiwe'):
    root = os.path.abspath(static_root).rstrip('/')
    url = _with_slashes(static_url)
    return (
        "{ config, pkgs, ... }:\n"
        "{\n"
        f"  systemd.tmpfiles.rules = [ \"d {root} 0755 {service} {service} -\" ];\n"
        "\n"
        f"  systemd.services.{service} = {{\n"
        f"    environment.STATIC_ROOT = \"{root}\";\n"
        "    preStart = ''\n"
        "      python manage.py collectstatic --noinput\n"
        "    '';\n"
        "  };\n"
        "\n"
        f"  services.nginx.virtualHosts.\"{server_name}\".locations.\"{url}\".alias = \"{root}/\";\n"
        "}\n"
    )
