"""Built-in earning lines used by the calculators."""

from escopo_folha.core.models.enums import TipoRegra, TipoRubrica
from escopo_folha.core.models.rubrica import (
    CODIGO_SALARIO_FAMILIA,
    CODIGO_VALE_TRANSPORTE,
    Rubrica,
)

_P = TipoRubrica.PROVENTO
_D = TipoRubrica.DESCONTO

# === Monthly payroll ===

SALARIO_BASE = Rubrica(
    codigo="100",
    descricao="SALÁRIO BASE",
    tipo=_P,
    incide_inss=True,
    incide_fgts=True,
    incide_irrf=True,
    natureza_esocial="1000",
)
PRO_LABORE = Rubrica(
    codigo="101",
    descricao="PRÓ-LABORE",
    tipo=_P,
    incide_inss=True,
    incide_irrf=True,
)
SALARIO_FAMILIA = Rubrica(
    codigo=CODIGO_SALARIO_FAMILIA,
    descricao="SALÁRIO-FAMÍLIA",
    tipo=_P,
    regra=TipoRegra.SALARIO_FAMILIA,
)
VALE_TRANSPORTE = Rubrica(
    codigo=CODIGO_VALE_TRANSPORTE,
    descricao="DESCONTO VALE-TRANSPORTE",
    tipo=_D,
    regra=TipoRegra.DESCONTO_VALE_TRANSPORTE,
)
INSS = Rubrica(
    codigo="901",
    descricao="INSS SOBRE SALÁRIO",
    tipo=_D,
    natureza_esocial="9201",
)
IRRF = Rubrica(
    codigo="902",
    descricao="IRRF SOBRE SALÁRIO",
    tipo=_D,
    natureza_esocial="9202",
)

# Lines the monthly calculator appends itself
CODIGOS_CALCULADOS = frozenset({INSS.codigo, IRRF.codigo})

# === 13th salary ===

DECIMO_TERCEIRO_PRIMEIRA = Rubrica(
    codigo="130", descricao="Adiantamento 13º Salário (1ª Parcela)", tipo=_P
)
DECIMO_TERCEIRO_INTEGRAL = Rubrica(
    codigo="131",
    descricao="13º Salário Integral",
    tipo=_P,
    incide_inss=True,
    incide_irrf=True,
)
DECIMO_TERCEIRO_ADIANTADO = Rubrica(
    codigo="132", descricao="Adiantamento 13º Salário (Pago na 1ª Parcela)", tipo=_D
)
DECIMO_TERCEIRO_UNICA = Rubrica(
    codigo="133",
    descricao="13º Salário (Parcela Única)",
    tipo=_P,
    incide_inss=True,
    incide_irrf=True,
)
INSS_DECIMO_TERCEIRO = Rubrica(codigo="134", descricao="INSS sobre 13º Salário", tipo=_D)
IRRF_DECIMO_TERCEIRO = Rubrica(codigo="135", descricao="IRRF sobre 13º Salário", tipo=_D)

# === Vacation ===

FERIAS = Rubrica(
    codigo="140", descricao="Férias", tipo=_P, incide_inss=True, incide_irrf=True
)
TERCO_FERIAS = Rubrica(
    codigo="141",
    descricao="1/3 Constitucional de Férias",
    tipo=_P,
    incide_inss=True,
    incide_irrf=True,
)
ABONO_PECUNIARIO = Rubrica(codigo="142", descricao="Abono Pecuniário", tipo=_P)
TERCO_ABONO = Rubrica(codigo="143", descricao="1/3 sobre Abono Pecuniário", tipo=_P)
ADIANTAMENTO_DECIMO_TERCEIRO = Rubrica(
    codigo="144", descricao="Adiantamento 1ª Parcela 13º Salário", tipo=_P
)
INSS_FERIAS = Rubrica(codigo="145", descricao="INSS sobre Férias", tipo=_D)
IRRF_FERIAS = Rubrica(codigo="146", descricao="IRRF sobre Férias", tipo=_D)

# === Termination ===

SALDO_SALARIO = Rubrica(
    codigo="150",
    descricao="Saldo de Salário",
    tipo=_P,
    incide_inss=True,
    incide_irrf=True,
)
AVISO_PREVIO_INDENIZADO = Rubrica(
    codigo="151", descricao="Aviso Prévio Indenizado", tipo=_P
)
FERIAS_PROPORCIONAIS = Rubrica(
    codigo="152", descricao="Férias Proporcionais", tipo=_P, incide_irrf=True
)
TERCO_FERIAS_PROPORCIONAIS = Rubrica(
    codigo="153",
    descricao="1/3 sobre Férias Proporcionais",
    tipo=_P,
    incide_irrf=True,
)
DECIMO_TERCEIRO_PROPORCIONAL = Rubrica(
    codigo="154",
    descricao="13º Salário Proporcional",
    tipo=_P,
    incide_inss=True,
    incide_irrf=True,
)
INSS_SALDO_SALARIO = Rubrica(codigo="155", descricao="INSS sobre Saldo de Salário", tipo=_D)
INSS_DECIMO_TERCEIRO_RESCISAO = Rubrica(
    codigo="156", descricao="INSS sobre 13º Salário", tipo=_D
)
IRRF_RESCISAO = Rubrica(codigo="157", descricao="IRRF sobre Rescisão", tipo=_D)
MULTA_FGTS = Rubrica(codigo="158", descricao="Multa de 40% sobre FGTS", tipo=_P)
