
def title_case(s: str) -> str:
    """Capitalize each space-separated piece: "sHoRt AnD sToUt" -> "Short And Stout".

    Splits on single spaces, so doubled spaces are preserved as-is.
    """
    return " ".join(w[:1].upper() + w[1:] for w in s.lower().split(" "))
