from fitz.tiles import TileCatalog, as_mask

CENTER = [
    ",,,,,",
    ",,,,,",
    ",,!,,",
    ",,,,,",
    ",,,,,",
]

RIGHT_OF_CENTER = [
    ",,,,,",
    ",,,,,",
    ",,,!,",
    ",,,,,",
    ",,,,,",
]

PLUS = [
    ",,,,,",
    ",,!,,",
    ",!!!,",
    ",,!,,",
    ",,,,,",
]

ELL = [
    ",!,,,",
    ",!,,,",
    ",!!!!",
    ",,,,,",
    "!,,,,",
]


def mask(rows):
    return as_mask([[ch == "!" for ch in row] for row in rows])


def catalog(*shapes) -> TileCatalog:
    cat = TileCatalog()
    for rows in shapes:
        cat.append_tile(mask(rows))
    return cat


def tile_text(*shapes) -> str:
    return "\n".join("".join(row + "\n" for row in rows) for rows in shapes)
