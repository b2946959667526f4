"""
Calculation catalog.

Static registry mapping each calculation kind to its label, category, input
schema and formula. The presentation layer reads it to build forms; the
engine reads it to coerce input and dispatch.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .calculators import civil, family, labor, social_security
from .calculators.common import to_choice, to_date, to_integer, to_number
from .config import EngineConfig
from .exceptions import UnknownCalculationError
from .rates import DEFAULT_INDEX, MonetaryIndex

logger = logging.getLogger(__name__)


class Category(str, Enum):
    LABOR = "labor"
    CIVIL = "civil"
    FAMILY = "family"
    SOCIAL_SECURITY = "social_security"
    TAX = "tax"


CATEGORY_LABELS = {
    Category.LABOR: "Trabalhista",
    Category.CIVIL: "Cível",
    Category.FAMILY: "Família",
    Category.SOCIAL_SECURITY: "Previdenciário",
    Category.TAX: "Tributário",
}


class CalculationKind(str, Enum):
    SEVERANCE_PAY = "severance_pay"
    OVERTIME = "overtime"
    NIGHT_SHIFT_PREMIUM = "night_shift_premium"
    UNHEALTHY_CONDITIONS_PREMIUM = "unhealthy_conditions_premium"
    HAZARD_PREMIUM = "hazard_premium"
    MONETARY_CORRECTION = "monetary_correction"
    DEFAULT_INTEREST = "default_interest"
    ATTORNEY_FEES = "attorney_fees"
    CHILD_SUPPORT = "child_support"
    ASSET_DIVISION = "asset_division"
    CONTRIBUTION_TIME = "contribution_time"


class FieldType(str, Enum):
    NUMBER = "number"
    INTEGER = "integer"
    DATE = "date"
    CHOICE = "choice"


class TotalUnit(str, Enum):
    CURRENCY = "currency"
    DAYS = "days"


@dataclass
class FieldSpec:
    """One input field of a calculation form."""

    name: str
    type: FieldType = FieldType.NUMBER
    default: Any = 0
    label: str = ""
    choices: Tuple = ()
    # Numeric choices are suggestions unless restricted
    restrict_choices: bool = False
    aliases: Mapping[str, str] = field(default_factory=dict)
    # EngineConfig attribute that overrides default
    config_default: Optional[str] = None

    def default_for(self, config: EngineConfig) -> Any:
        if self.config_default:
            return getattr(config, self.config_default)
        return self.default

    def coerce(self, value: Any, config: EngineConfig) -> Any:
        """Coerce a raw form value; never raises."""
        default = self.default_for(config)
        if self.type == FieldType.DATE:
            return to_date(value)
        if self.type == FieldType.CHOICE:
            return to_choice(value, self.choices, default, self.aliases)
        if self.type == FieldType.INTEGER:
            coerced = to_integer(value, default)
        else:
            coerced = to_number(value, default)
        if self.restrict_choices and coerced not in self.choices:
            logger.debug("%s=%r not in %s, using %r", self.name, value, self.choices, default)
            return default
        return coerced


@dataclass
class CatalogEntry:
    """A calculation kind with its form schema and formula."""

    kind: CalculationKind
    label: str
    description: str
    category: Category
    fields: Tuple[FieldSpec, ...]
    formula: Callable[..., Any]
    total_unit: TotalUnit = TotalUnit.CURRENCY
    # Id used by the legacy dashboard's saved calculations
    legacy_id: str = ""
    # (formula keyword, EngineConfig attribute) pairs passed on every call
    config_args: Tuple[Tuple[str, str], ...] = ()

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]


_MONEY = FieldType.NUMBER


def _entries() -> List[CatalogEntry]:
    return [
        CatalogEntry(
            kind=CalculationKind.SEVERANCE_PAY,
            label="Verbas Rescisórias",
            description="FGTS, aviso prévio, 13º, férias",
            category=Category.LABOR,
            fields=(
                FieldSpec("base_salary", _MONEY, 0, "Salário Base"),
                FieldSpec("months_worked", FieldType.INTEGER, 0, "Meses Trabalhados"),
                FieldSpec(
                    "unused_vacation_periods",
                    FieldType.INTEGER,
                    0,
                    "Férias Vencidas",
                    choices=(0, 1, 2),
                ),
                FieldSpec(
                    "notice_type",
                    FieldType.CHOICE,
                    labor.NoticeType.WORKED.value,
                    "Aviso Prévio",
                    choices=tuple(t.value for t in labor.NoticeType),
                    aliases=labor.NOTICE_TYPE_ALIASES,
                ),
                FieldSpec(
                    "termination_reason",
                    FieldType.CHOICE,
                    labor.TerminationReason.WITHOUT_CAUSE.value,
                    "Motivo da Rescisão",
                    choices=tuple(r.value for r in labor.TerminationReason),
                    aliases=labor.TERMINATION_REASON_ALIASES,
                ),
            ),
            formula=labor.calculate_severance_pay,
            legacy_id="verbas_rescisorias",
        ),
        CatalogEntry(
            kind=CalculationKind.OVERTIME,
            label="Horas Extras",
            description="Adicional de 50% ou 100%",
            category=Category.LABOR,
            fields=(
                FieldSpec("base_salary", _MONEY, 0, "Salário Base"),
                FieldSpec(
                    "monthly_hours",
                    FieldType.NUMBER,
                    label="Horas Mensais (Jornada)",
                    config_default="standard_monthly_hours",
                ),
                FieldSpec("overtime_hours", FieldType.NUMBER, 0, "Quantidade de Horas Extras"),
                FieldSpec(
                    "premium_percent",
                    FieldType.NUMBER,
                    labor.OVERTIME_PARAMS["default_premium_percent"],
                    "Percentual Adicional",
                    choices=labor.OVERTIME_PARAMS["premium_choices"],
                ),
            ),
            formula=labor.calculate_overtime,
            legacy_id="horas_extras",
        ),
        CatalogEntry(
            kind=CalculationKind.NIGHT_SHIFT_PREMIUM,
            label="Adicional Noturno",
            description="20% sobre hora normal",
            category=Category.LABOR,
            fields=(
                FieldSpec("base_salary", _MONEY, 0, "Salário Base"),
                FieldSpec("night_hours", FieldType.NUMBER, 0, "Horas Noturnas"),
            ),
            formula=labor.calculate_night_shift_premium,
            legacy_id="adicional_noturno",
            config_args=(("monthly_hours", "standard_monthly_hours"),),
        ),
        CatalogEntry(
            kind=CalculationKind.UNHEALTHY_CONDITIONS_PREMIUM,
            label="Adicional de Insalubridade",
            description="10%, 20% ou 40% do salário mínimo",
            category=Category.LABOR,
            fields=(
                FieldSpec(
                    "minimum_wage",
                    _MONEY,
                    label="Salário Mínimo de Referência",
                    config_default="reference_minimum_wage",
                ),
                FieldSpec(
                    "degree_percent",
                    FieldType.NUMBER,
                    labor.UNHEALTHY_PARAMS["default_degree_percent"],
                    "Grau de Insalubridade",
                    choices=labor.UNHEALTHY_PARAMS["degree_choices"],
                    restrict_choices=True,
                ),
                FieldSpec("months", FieldType.NUMBER, 0, "Meses de Exposição"),
            ),
            formula=labor.calculate_unhealthy_conditions_premium,
            legacy_id="insalubridade",
        ),
        CatalogEntry(
            kind=CalculationKind.HAZARD_PREMIUM,
            label="Adicional de Periculosidade",
            description="30% sobre salário base",
            category=Category.LABOR,
            fields=(
                FieldSpec("base_salary", _MONEY, 0, "Salário Base"),
                FieldSpec("months", FieldType.NUMBER, 0, "Meses de Exposição"),
            ),
            formula=labor.calculate_hazard_premium,
            legacy_id="periculosidade",
        ),
        CatalogEntry(
            kind=CalculationKind.MONETARY_CORRECTION,
            label="Correção Monetária",
            description="IPCA, INPC, IGP-M",
            category=Category.CIVIL,
            fields=(
                FieldSpec("original_value", _MONEY, 0, "Valor Original"),
                FieldSpec("start_date", FieldType.DATE, None, "Data Inicial"),
                FieldSpec("end_date", FieldType.DATE, None, "Data Final"),
                FieldSpec(
                    "index",
                    FieldType.CHOICE,
                    DEFAULT_INDEX.value,
                    "Índice de Correção",
                    choices=tuple(i.value for i in MonetaryIndex),
                    aliases={"igp-m": MonetaryIndex.IGPM.value},
                ),
                FieldSpec(
                    "monthly_interest_percent",
                    FieldType.NUMBER,
                    civil.CIVIL_PARAMS["default_monthly_interest_percent"],
                    "Juros de Mora (% a.m.)",
                ),
            ),
            formula=civil.calculate_monetary_correction,
            legacy_id="correcao_monetaria",
            config_args=(("rates", "rate_provider"),),
        ),
        CatalogEntry(
            kind=CalculationKind.DEFAULT_INTEREST,
            label="Juros de Mora",
            description="1% ao mês ou taxa SELIC",
            category=Category.CIVIL,
            fields=(
                FieldSpec("original_value", _MONEY, 0, "Valor Original"),
                FieldSpec("start_date", FieldType.DATE, None, "Data Inicial"),
                FieldSpec("end_date", FieldType.DATE, None, "Data Final"),
                FieldSpec(
                    "monthly_interest_percent",
                    FieldType.NUMBER,
                    civil.CIVIL_PARAMS["default_monthly_interest_percent"],
                    "Juros de Mora (% a.m.)",
                ),
            ),
            formula=civil.calculate_default_interest,
            legacy_id="juros_mora",
        ),
        CatalogEntry(
            kind=CalculationKind.ATTORNEY_FEES,
            label="Honorários de Sucumbência",
            description="10% a 20% do valor da causa",
            category=Category.CIVIL,
            fields=(
                FieldSpec("case_value", _MONEY, 0, "Valor da Causa"),
                FieldSpec(
                    "percent",
                    FieldType.NUMBER,
                    civil.CIVIL_PARAMS["default_fees_percent"],
                    "Percentual",
                ),
            ),
            formula=civil.calculate_attorney_fees,
            legacy_id="honorarios_sucumbencia",
        ),
        CatalogEntry(
            kind=CalculationKind.CHILD_SUPPORT,
            label="Pensão Alimentícia",
            description="Cálculo sobre rendimentos",
            category=Category.FAMILY,
            fields=(
                FieldSpec(
                    "payer_monthly_income",
                    _MONEY,
                    0,
                    "Rendimento Mensal do Alimentante",
                ),
                FieldSpec(
                    "percent",
                    FieldType.NUMBER,
                    family.FAMILY_PARAMS["default_support_percent"],
                    "Percentual",
                    choices=family.FAMILY_PARAMS["support_percent_choices"],
                ),
                FieldSpec("child_count", FieldType.INTEGER, 1, "Número de Filhos"),
            ),
            formula=family.calculate_child_support,
            legacy_id="pensao_alimenticia",
        ),
        CatalogEntry(
            kind=CalculationKind.ASSET_DIVISION,
            label="Partilha de Bens",
            description="Divisão do patrimônio",
            category=Category.FAMILY,
            fields=(
                FieldSpec("total_assets", _MONEY, 0, "Patrimônio Total"),
                FieldSpec(
                    "percent",
                    FieldType.NUMBER,
                    family.FAMILY_PARAMS["default_share_percent"],
                    "Percentual da Parte",
                ),
            ),
            formula=family.calculate_asset_division,
            legacy_id="partilha_bens",
        ),
        CatalogEntry(
            kind=CalculationKind.CONTRIBUTION_TIME,
            label="Tempo de Contribuição",
            description="Anos, meses e dias",
            category=Category.SOCIAL_SECURITY,
            fields=(
                FieldSpec("start_date", FieldType.DATE, None, "Data Inicial"),
                FieldSpec("end_date", FieldType.DATE, None, "Data Final"),
            ),
            formula=social_security.calculate_contribution_time,
            total_unit=TotalUnit.DAYS,
            legacy_id="tempo_contribuicao",
        ),
    ]


CATALOG: Dict[CalculationKind, CatalogEntry] = {e.kind: e for e in _entries()}

LEGACY_KIND_IDS: Dict[str, CalculationKind] = {
    e.legacy_id: e.kind for e in CATALOG.values() if e.legacy_id
}


def resolve_kind(kind: Any) -> CalculationKind:
    """
    Resolve a kind tag to a CalculationKind.

    Accepts CalculationKind members, their string values, and the ids the
    legacy dashboard stored (e.g. "verbas_rescisorias").

    Raises:
        UnknownCalculationError: if the tag names no catalog entry
    """
    if isinstance(kind, CalculationKind):
        return kind
    if isinstance(kind, str):
        tag = kind.strip().lower()
        try:
            return CalculationKind(tag)
        except ValueError:
            pass
        if tag in LEGACY_KIND_IDS:
            return LEGACY_KIND_IDS[tag]
    raise UnknownCalculationError(kind)


def get_entry(kind: Any) -> CatalogEntry:
    """Return the catalog entry for a kind (see resolve_kind)."""
    return CATALOG[resolve_kind(kind)]


def entries_by_category() -> Dict[Category, List[CatalogEntry]]:
    """All entries grouped by category, every category present."""
    grouped: Dict[Category, List[CatalogEntry]] = {c: [] for c in Category}
    for entry in CATALOG.values():
        grouped[entry.category].append(entry)
    return grouped
