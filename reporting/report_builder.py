from jinja2 import Template

_TEMPLATE = Template("""
# EBS Volume Discovery: {{ node.prefix }}/{{ node.node_id }}

**Instance:** {{ node.instance_id }} ({{ node.availability_zone }})
**Logical volumes:** {{ groups|length }}

{% for name, members in groups.items() %}
## {{ name or "(untagged)" }}
- Members: {{ members|length }}
- Declared size: {{ "unset" if members[0].volume_size == -1 else members[0].volume_size }}
- RAID level: {{ "unset" if members[0].raid_level == -1 else members[0].raid_level }}
- Mount path: {{ members[0].mount_path or "unset" }}
- Filesystem: {{ members[0].fs_type or "unset" }}
{% for v in members %}
  - {{ v.volume_id }}: {{ v.attached_device or "not attached" }}
{% endfor %}
{% endfor %}
{% if groups|length == 0 %}
- No volumes found
{% endif %}
""")


def build_volume_report(node, groups):
    return _TEMPLATE.render(node=node, groups=groups)
