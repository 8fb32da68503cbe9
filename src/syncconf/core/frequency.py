"""
Opções de frequência de sincronização.

Lista fixa de schedules selecionáveis na sessão de edição. `None` é a
opção manual. Rótulos são texto simples: tradução é responsabilidade da
camada de apresentação.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from syncconf.core.connection.types import Schedule, TimeUnit


@dataclass(frozen=True)
class FrequencyOption:
    text: str
    config: Optional[Schedule]


FREQUENCY_OPTIONS: Tuple[FrequencyOption, ...] = (
    FrequencyOption("manual", None),
    FrequencyOption("5 min", Schedule(5, TimeUnit.MINUTES)),
    FrequencyOption("15 min", Schedule(15, TimeUnit.MINUTES)),
    FrequencyOption("30 min", Schedule(30, TimeUnit.MINUTES)),
    FrequencyOption("1 hour", Schedule(1, TimeUnit.HOURS)),
    FrequencyOption("2 hours", Schedule(2, TimeUnit.HOURS)),
    FrequencyOption("3 hours", Schedule(3, TimeUnit.HOURS)),
    FrequencyOption("6 hours", Schedule(6, TimeUnit.HOURS)),
    FrequencyOption("8 hours", Schedule(8, TimeUnit.HOURS)),
    FrequencyOption("12 hours", Schedule(12, TimeUnit.HOURS)),
    FrequencyOption("24 hours", Schedule(24, TimeUnit.HOURS)),
)


def frequency_options() -> List[Dict[str, Any]]:
    """Linhas `{value, label}`; a opção manual é rotulada sem prefixo."""
    rows = []
    for option in FREQUENCY_OPTIONS:
        if option.config is None:
            rows.append({"value": None, "label": option.text})
        else:
            rows.append({"value": option.config.to_dict(), "label": f"every {option.text}"})
    return rows


def find_frequency(schedule: Optional[Schedule]) -> Optional[FrequencyOption]:
    return next((o for o in FREQUENCY_OPTIONS if o.config == schedule), None)
