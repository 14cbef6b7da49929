"""Main Typer application for Escopo Folha."""

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from escopo_folha import __version__
from escopo_folha.cli.console import console, print_error, print_success
from escopo_folha.core.calculators import (
    calculate_payroll,
    calculate_termination,
    calculate_thirteenth,
    calculate_vacation,
)
from escopo_folha.core.models import (
    CalculationResult,
    Funcionario,
    MotivoRescisao,
    ParcelaDecimoTerceiro,
    TipoAviso,
)
from escopo_folha.core.models.brackets import BracketTable
from escopo_folha.core.rules import ANO_PADRAO, obter_tabelas
from escopo_folha.core.services import generate_summary
from escopo_folha.infrastructure.loaders import load_input_file
from escopo_folha.shared.exceptions import EscopoFolhaError
from escopo_folha.shared.formatters import format_currency, format_percentage
from escopo_folha.shared.logging_config import configure_logging
from escopo_folha.shared.validators import validar_valor

app = typer.Typer(
    name="escopo-folha",
    help="Cálculo de folha de pagamento, 13º, férias e rescisão (INSS, IRRF, FGTS)",
    add_completion=True,
    no_args_is_help=True,
)

DATE_FORMATS = ["%Y-%m-%d", "%d/%m/%Y"]


class FormatoSaida(str, Enum):
    """Output format of the calculation commands."""

    TABLE = "table"
    JSON = "json"


ArquivoArg = Annotated[
    Path,
    typer.Argument(
        help="Arquivo .json com funcionário (ou sócio) e eventos",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]
AnoOption = Annotated[
    int,
    typer.Option("--ano", "-a", help="Ano das tabelas fiscais"),
]
OutputOption = Annotated[
    FormatoSaida,
    typer.Option("--output", "-o", help="Formato de saída: table, json"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Escopo Folha v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Mostra o detalhamento do cálculo (log DEBUG)"),
    ] = False,
) -> None:
    """Escopo Folha - Calculadora de folha de pagamento."""
    configure_logging(verbose)


@app.command()
def tabelas(
    ano: AnoOption = ANO_PADRAO,
) -> None:
    """Exibe as tabelas de INSS e IRRF e as constantes do ano."""
    try:
        tabelas_ano = obter_tabelas(ano)
    except EscopoFolhaError as e:
        print_error(str(e))
        raise typer.Exit(1)

    console.print()
    console.print(_bracket_table(f"INSS {ano}", tabelas_ano.inss))
    console.print()
    console.print(_bracket_table(f"IRRF {ano}", tabelas_ano.irrf))
    console.print()
    console.print(
        Panel.fit(
            f"[header]Teto INSS:[/header] {format_currency(tabelas_ano.teto_inss)}\n"
            f"[header]Dedução por dependente (IRRF):[/header] "
            f"{format_currency(tabelas_ano.deducao_dependente_irrf)}\n"
            f"[header]Salário-família:[/header] "
            f"{format_currency(tabelas_ano.salario_familia_valor)} por dependente até "
            f"{format_currency(tabelas_ano.salario_familia_limite)}\n"
            f"[header]Salário mínimo:[/header] {format_currency(tabelas_ano.salario_minimo)}\n"
            f"[header]FGTS:[/header] {format_percentage(tabelas_ano.aliquota_fgts * 100)}",
            title=f"Constantes {ano}",
            border_style="blue",
        )
    )


@app.command()
def folha(
    arquivo: ArquivoArg,
    ano: AnoOption = ANO_PADRAO,
    output: OutputOption = FormatoSaida.TABLE,
) -> None:
    """Calcula a folha mensal (ou o pró-labore de um sócio)."""
    try:
        entrada = load_input_file(arquivo)
        result = calculate_payroll(entrada.trabalhador, entrada.eventos, obter_tabelas(ano))
        titulo = "Pró-labore" if result.socio else "Folha de Pagamento"
        _output_result(result, entrada.trabalhador, titulo, output)
    except EscopoFolhaError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command(name="decimo-terceiro")
def decimo_terceiro(
    arquivo: ArquivoArg,
    parcela: Annotated[
        ParcelaDecimoTerceiro,
        typer.Option("--parcela", "-p", help="Parcela: primeira, segunda ou unica"),
    ] = ParcelaDecimoTerceiro.PRIMEIRA,
    ano: AnoOption = ANO_PADRAO,
    output: OutputOption = FormatoSaida.TABLE,
) -> None:
    """Calcula uma parcela do 13º salário."""
    try:
        entrada = load_input_file(arquivo)
        result = calculate_thirteenth(
            entrada.trabalhador, ano, parcela, obter_tabelas(ano)
        )
        titulo = f"13º Salário {ano} ({result.meses_trabalhados}/12)"
        _output_result(result, entrada.trabalhador, titulo, output)
    except EscopoFolhaError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def ferias(
    arquivo: ArquivoArg,
    inicio: Annotated[
        datetime,
        typer.Option("--inicio", "-i", help="Início das férias", formats=DATE_FORMATS),
    ],
    dias: Annotated[int, typer.Option("--dias", "-d", help="Dias de férias (1-30)")] = 30,
    vender_dias: Annotated[
        bool,
        typer.Option("--vender-dias", help="Vende 10 dias (abono pecuniário)"),
    ] = False,
    adiantar_13: Annotated[
        bool,
        typer.Option("--adiantar-13", help="Adianta a 1ª parcela do 13º"),
    ] = False,
    ano: AnoOption = ANO_PADRAO,
    output: OutputOption = FormatoSaida.TABLE,
) -> None:
    """Calcula o recibo de férias."""
    try:
        entrada = load_input_file(arquivo)
        result = calculate_vacation(
            entrada.trabalhador,
            inicio.date(),
            dias,
            vender_dias=vender_dias,
            adiantar_decimo_terceiro=adiantar_13,
            tabelas=obter_tabelas(ano),
        )
        titulo = (
            f"Férias {result.data_inicio:%d/%m/%Y} a {result.data_fim:%d/%m/%Y} "
            f"(retorno {result.data_retorno:%d/%m/%Y})"
        )
        _output_result(result, entrada.trabalhador, titulo, output)
    except EscopoFolhaError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def rescisao(
    arquivo: ArquivoArg,
    data: Annotated[
        datetime,
        typer.Option("--data", help="Data da rescisão", formats=DATE_FORMATS),
    ],
    motivo: Annotated[
        MotivoRescisao,
        typer.Option("--motivo", "-m", help="Motivo da rescisão"),
    ] = MotivoRescisao.DISPENSA_SEM_JUSTA_CAUSA,
    aviso: Annotated[
        TipoAviso,
        typer.Option("--aviso", help="Aviso prévio: indenizado ou trabalhado"),
    ] = TipoAviso.TRABALHADO,
    saldo_fgts: Annotated[
        str,
        typer.Option("--saldo-fgts", help="Saldo da conta do FGTS (ex.: 5400.00)"),
    ] = "0",
    ano: AnoOption = ANO_PADRAO,
    output: OutputOption = FormatoSaida.TABLE,
) -> None:
    """Calcula as verbas rescisórias."""
    try:
        entrada = load_input_file(arquivo)
        result = calculate_termination(
            entrada.trabalhador,
            data.date(),
            motivo,
            aviso,
            validar_valor(saldo_fgts, "Saldo do FGTS"),
            obter_tabelas(ano),
        )
        titulo = f"Rescisão em {result.data_rescisao:%d/%m/%Y} ({result.motivo.value})"
        _output_result(result, entrada.trabalhador, titulo, output)
    except EscopoFolhaError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def resumo(
    arquivos: Annotated[
        list[Path],
        typer.Argument(
            help="Arquivos .json (um por funcionário ou sócio)",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    ano: AnoOption = ANO_PADRAO,
    output: OutputOption = FormatoSaida.TABLE,
) -> None:
    """Calcula a folha de vários funcionários e mostra o resumo do período."""
    try:
        tabelas_ano = obter_tabelas(ano)
        resultados = []
        for arquivo in arquivos:
            entrada = load_input_file(arquivo)
            resultados.append(
                calculate_payroll(entrada.trabalhador, entrada.eventos, tabelas_ano)
            )
        summary = generate_summary(resultados)
    except EscopoFolhaError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if output == FormatoSaida.JSON:
        print(json.dumps(summary.model_dump(), indent=2, default=str))
        return

    table = Table(title=f"Resumo da Folha ({summary.quantidade} cálculos)", show_header=True)
    table.add_column("Item", style="cyan")
    table.add_column("Valor", justify="right")
    table.add_row("Total de proventos", format_currency(summary.total_proventos))
    table.add_row("Total de descontos", format_currency(summary.total_descontos))
    table.add_row("Total líquido", f"[value]{format_currency(summary.total_liquido)}[/value]")
    table.add_row("INSS retido", format_currency(summary.total_inss))
    table.add_row("IRRF retido", format_currency(summary.total_irrf))
    table.add_row("FGTS a recolher", format_currency(summary.total_fgts))
    table.add_row("Base INSS", format_currency(summary.total_base_inss))
    table.add_row("Base IRRF", format_currency(summary.total_base_irrf))
    table.add_row("Base FGTS", format_currency(summary.total_base_fgts))
    console.print()
    console.print(table)
    print_success(f"{summary.quantidade} folha(s) calculada(s)")


def _bracket_table(titulo: str, tabela: BracketTable) -> Table:
    table = Table(title=titulo, show_header=True, header_style="bold")
    table.add_column("Até", justify="right")
    table.add_column("Alíquota", justify="right")
    table.add_column("Dedução", justify="right")

    for faixa in tabela.faixas:
        limite = format_currency(faixa.limite) if faixa.limite is not None else "acima"
        table.add_row(
            limite,
            format_percentage(faixa.aliquota * 100),
            format_currency(faixa.deducao),
        )
    return table


def _output_result(
    result: CalculationResult,
    trabalhador: Funcionario,
    titulo: str,
    output: FormatoSaida,
) -> None:
    """Print a calculation result as JSON or as a payslip table."""
    if output == FormatoSaida.JSON:
        print(json.dumps(result.model_dump(), indent=2, default=str))
        return

    console.print()
    console.print(
        Panel.fit(
            f"[header]Nome:[/header] {trabalhador.nome or '-'}\n"
            f"[header]Salário base:[/header] {format_currency(trabalhador.salario_base)}\n"
            f"[header]Dependentes IRRF:[/header] {trabalhador.dependentes_irrf}",
            title=titulo,
            border_style="blue",
        )
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Cód.", style="dim", width=6)
    table.add_column("Descrição", style="cyan")
    table.add_column("Referência", justify="right")
    table.add_column("Proventos", justify="right", style="provento")
    table.add_column("Descontos", justify="right", style="desconto")

    for evento in result.eventos:
        table.add_row(
            evento.rubrica.codigo,
            evento.rubrica.descricao,
            evento.referencia_formatada,
            format_currency(evento.provento) if evento.is_provento else "",
            "" if evento.is_provento else format_currency(evento.desconto),
        )

    table.add_section()
    table.add_row(
        "",
        "[bold]Totais[/bold]",
        "",
        format_currency(result.total_proventos),
        format_currency(result.total_descontos),
    )
    console.print(table)

    console.print(
        f"[header]Líquido a receber:[/header] [value]{format_currency(result.liquido)}[/value]"
    )
    console.print(
        f"[muted]Base INSS {format_currency(result.base_inss)} | "
        f"Base IRRF {format_currency(result.base_irrf)} | "
        f"Base FGTS {format_currency(result.base_fgts)} | "
        f"FGTS {format_currency(result.valor_fgts)}[/muted]"
    )


if __name__ == "__main__":
    app()
