"""Cloud layer decoder."""

from typing import List, Optional

# third party
import regex

# Local
from pyvatis.decoder._base import ChunkDecoder, DecodedChunk
from pyvatis.models.metar import (
    CloudAmount,
    CloudLayer,
    CloudType,
    DecodedMetar,
    Unit,
    Value,
    get_ceiling_layer,
)
from pyvatis.reference import CEILING_AMOUNTS
from pyvatis.util import to_int

LAYER_RE = (
    r"(?P<amount>VV|FEW|SCT|BKN|OVC|///)(?P<height>\d{3}|///)"
    r"(?P<type>CB|TCU|///)? "
)
CLOUD_RE = (
    r"^((?P<clear>NSC|NCD|CLR|SKC) "
    rf"|(?P<layers>({LAYER_RE}){{1,4}}))"
)
LAYER = regex.compile(LAYER_RE)


class CloudChunk(DecodedChunk):
    """Found clouds and the resulting ceiling."""

    clouds: Optional[List[CloudLayer]] = None
    ceiling: Optional[CloudLayer] = None

    def apply(self, metar: DecodedMetar):
        """Merge."""
        metar.clouds = self.clouds
        metar.ceiling = self.ceiling


def _make_layer(d: dict, raw: str) -> CloudLayer:
    """Build one layer, heights are in hundreds of feet."""
    layer = CloudLayer(raw=raw)
    if d["amount"] != "///":
        layer.amount = CloudAmount(d["amount"])
    height = to_int(d["height"])
    if height is not None:
        layer.base_height = Value(value=height * 100, units=Unit.FEET)
    if d["type"] is not None:
        layer.type = CloudType(d["type"])
    return layer


class CloudChunkDecoder(ChunkDecoder):
    """NSC, NCD, CLR, SKC or up to four cloud layers."""

    name = "clouds"

    def __init__(self, *args, ceiling_amounts=CEILING_AMOUNTS, **kwargs):
        """constructor

        Args:
          ceiling_amounts (list): cloud amounts that form a ceiling.
        """
        super().__init__(*args, **kwargs)
        self.ceiling_amounts = tuple(ceiling_amounts)

    def get_regex(self):
        """Pattern."""
        return CLOUD_RE

    def parse(self, remaining, with_cavok=False):
        """Clouds are required, unless CAVOK was reported."""
        m, new_remaining = self.consume(remaining)
        if m is None:
            if with_cavok:
                return CloudChunk(), new_remaining
            self.fail("Bad format for clouds information", remaining)
        if m.group("clear") is not None:
            layer = CloudLayer(
                amount=CloudAmount(m.group("clear")), raw=m.group("clear")
            )
            return CloudChunk(clouds=[layer]), new_remaining
        layers = [
            _make_layer(lm.groupdict(), lm.group(0).strip())
            for lm in LAYER.finditer(m.group("layers"))
        ]
        chunk = CloudChunk(
            clouds=layers,
            ceiling=get_ceiling_layer(layers, self.ceiling_amounts),
        )
        return chunk, new_remaining
