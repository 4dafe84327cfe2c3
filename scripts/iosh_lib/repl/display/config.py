"""
Configuration display functions for the shell.

Turns the key-value running/startup configuration into IOS-style
configuration text using a Jinja2 template.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATE_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
CONFIG_TEMPLATE = "running-config.j2"

INTERFACE_PREFIX = "interface "
SHUTDOWN_SUFFIX = " shutdown"


def _template_env(template_dir: Path = TEMPLATE_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _group_entries(entries: dict[str, str]) -> tuple[list[dict], list[tuple[str, str]]]:
    """Split config entries into per-interface blocks and other lines."""
    interfaces: dict[str, dict] = {}
    extra = []
    for key, value in sorted(entries.items()):
        if key == "hostname":
            continue
        if key.startswith(INTERFACE_PREFIX):
            name = key[len(INTERFACE_PREFIX):]
            if name.endswith(SHUTDOWN_SUFFIX):
                name = name[:-len(SHUTDOWN_SUFFIX)]
                iface = interfaces.setdefault(name, {"name": name, "address": None, "shutdown": True})
                iface["shutdown"] = value == "true"
            else:
                iface = interfaces.setdefault(name, {"name": name, "address": None, "shutdown": True})
                iface["address"] = value
            continue
        extra.append((key, value))
    return list(interfaces.values()), extra


def render_config_text(hostname: str, entries: dict[str, str]) -> str:
    """Render a key-value configuration as IOS configuration text."""
    interfaces, extra = _group_entries(entries)
    template = _template_env().get_template(CONFIG_TEMPLATE)
    return template.render(hostname=hostname, interfaces=interfaces, extra=extra)


def show_startup_config(hostname: str, startup_config: dict[str, str]) -> None:
    """Print the startup configuration."""
    print("Building configuration...")
    print()
    if not startup_config:
        print("startup-config is not present")
        return
    text = render_config_text(startup_config.get("hostname", hostname), startup_config)
    print(f"Startup configuration : {len(text)} bytes")
    print()
    print(text, end="")
