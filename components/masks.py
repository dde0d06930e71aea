# === components/masks.py ===

def is_blank(s) -> bool:
    # "0" conta como vazio, igual aos campos do formulário original
    return not s or s == "0"

def pad_left(s: str, width: int, pad: str) -> str:
    """Completa à esquerda repetindo `pad` e cortando o excesso (como str_pad do PHP)."""
    s = s or ""
    missing = width - len(s)
    if missing <= 0 or not pad:
        return s
    fill = (pad * (missing // len(pad) + 1))[:missing]
    return f"{fill}{s}"

def pad_year(s: str) -> str:
    # "19" -> "1919", "5" -> "1915"; vazio continua vazio
    return "" if is_blank(s) else pad_left(s, 4, "19")

def pad_part(s: str, width: int = 2) -> str:
    return "" if is_blank(s) else pad_left(s, width, "0")
