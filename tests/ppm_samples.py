"""Builders for small PPM files used across the tests."""


def p3_bytes(width, height, values, max_val=255, header_comment=None):
    lines = ["P3"]
    if header_comment:
        lines.append(f"# {header_comment}")
    lines.append(f"{width} {height}")
    lines.append(str(max_val))
    lines.append(" ".join(str(v) for v in values))
    return ("\n".join(lines) + "\n").encode("ascii")


def p6_bytes(width, height, payload, max_val=255):
    return f"P6\n{width} {height}\n{max_val}\n".encode("ascii") + bytes(payload)
