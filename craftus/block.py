"""Block types with their names, colours, opacity and textures."""

from __future__ import annotations

from enum import IntEnum

from craftus.direction import Direction


class Block(IntEnum):
    AIR = 0
    STONE = 1
    DIRT = 2
    GRASS = 3
    COBBLESTONE = 4
    SAND = 5
    LOG = 6
    LEAVES = 7
    GLASS = 8
    STONEBRICK = 9
    BRICK = 10
    PLANKS = 11
    WOOL = 12
    BEDROCK = 13


BLOCKS_COUNT = len(Block)

BLOCK_NAMES = (
    "Air",
    "Stone",
    "Dirt",
    "Grass",
    "Cobblestone",
    "Sand",
    "Log",
    "Leaves",
    "Glass",
    "Stone Bricks",
    "Bricks",
    "Planks",
    "Wool",
    "Bedrock",
)

TEXTURE_PATH_PREFIX = "romfs:/textures/blocks/"

TEXTURE_FILES = tuple(
    TEXTURE_PATH_PREFIX + name
    for name in (
        "stone.png",
        "dirt.png",
        "cobblestone.png",
        "grass_side.png",
        "grass_top.png",
        "stonebrick.png",
        "sand.png",
        "log_oak.png",
        "log_oak_top.png",
        "leaves_oak.png",
        "glass.png",
        "brick.png",
        "planks_oak.png",
        "wool.png",
        "bedrock.png",
    )
)

# white, orange, magenta, light blue, yellow, lime, pink, gray,
# silver, cyan, purple, blue, brown, green, red, black
WOOL_COLORS = (
    16777215,
    14188339,
    11685080,
    6724056,
    15066419,
    8375321,
    15892389,
    5000268,
    10066329,
    5013401,
    8339378,
    3361970,
    6704179,
    6717235,
    10040115,
    1644825,
)

_FOLIAGE_COLOR = (140, 214, 123)
_WHITE = (255, 255, 255)

_SINGLE_TEXTURE = {
    Block.STONE: "stone.png",
    Block.DIRT: "dirt.png",
    Block.COBBLESTONE: "cobblestone.png",
    Block.SAND: "sand.png",
    Block.LEAVES: "leaves_oak.png",
    Block.GLASS: "glass.png",
    Block.STONEBRICK: "stonebrick.png",
    Block.BRICK: "brick.png",
    Block.PLANKS: "planks_oak.png",
    Block.WOOL: "wool.png",
    Block.BEDROCK: "bedrock.png",
}


def block_name(block: int) -> str:
    return BLOCK_NAMES[Block(block)]


def block_color(block: int, metadata: int, direction: Direction) -> tuple[int, int, int]:
    """Tint applied to a block face, as 8 bit RGB."""
    if (block == Block.GRASS and direction == Direction.TOP) or block == Block.LEAVES:
        return _FOLIAGE_COLOR
    if block == Block.WOOL:
        c = WOOL_COLORS[metadata]
        return ((c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF)
    return _WHITE


def block_opaque(block: int, metadata: int = 0) -> bool:
    return block not in (Block.AIR, Block.LEAVES, Block.GLASS)


def texture_file(block: int, direction: Direction) -> str | None:
    """Texture path of a block face; air has none."""
    block = Block(block)
    if block is Block.AIR:
        return None
    if block is Block.GRASS:
        if direction == Direction.TOP:
            name = "grass_top.png"
        elif direction == Direction.BOTTOM:
            name = "dirt.png"
        else:
            name = "grass_side.png"
    elif block is Block.LOG:
        if direction in (Direction.TOP, Direction.BOTTOM):
            name = "log_oak_top.png"
        else:
            name = "log_oak.png"
    else:
        name = _SINGLE_TEXTURE[block]
    return TEXTURE_PATH_PREFIX + name