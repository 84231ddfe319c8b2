"""
Export functionality for writing season schedules to Excel.
"""

import pandas as pd
from .models import SeasonSchedule, season_to_dataframe
from .config import LeagueConfig
from .matchups import get_schedule_summary


def write_excel(season: SeasonSchedule, config: LeagueConfig, output_path: str) -> None:
    """
    Write a season schedule to Excel with an optional team summary sheet.

    Args:
        season: Season schedule to export
        config: League configuration
        output_path: Path to output Excel file
    """
    print(f"Writing schedule to {output_path}")

    with pd.ExcelWriter(output_path, engine='xlsxwriter') as writer:
        _write_season_schedule(season, config, writer)

        if config.excel.include_summaries:
            _write_team_summary(season, config, writer)

    print(f"Schedule exported successfully to {output_path}")


def _write_season_schedule(season: SeasonSchedule, config: LeagueConfig, writer) -> None:
    """Write the main schedule sheet."""
    df = season_to_dataframe(season)
    sheet_name = config.excel.sheets.get('schedule_name', 'Season Schedule')

    if df.empty:
        print("Warning: No pairings to export")
        df = pd.DataFrame(columns=['Week', 'Order', 'Type', 'Home', 'Away', 'Bye'])

    df.to_excel(writer, sheet_name=sheet_name, index=False)

    worksheet = writer.sheets[sheet_name]
    workbook = writer.book
    _format_schedule_worksheet(worksheet, workbook, df)


def _write_team_summary(season: SeasonSchedule, config: LeagueConfig, writer) -> None:
    """Write per-team home/away/bye counts."""
    sheet_name = config.excel.sheets.get('summary_name', 'Team Summary')
    summary = get_schedule_summary(season)

    team_data = []
    for identity, stats in summary.get('teams', {}).items():
        team_data.append({
            'Team': stats['name'],
            'Identity': identity,
            'Games': stats['games'],
            'Home Games': stats['home'],
            'Away Games': stats['away'],
            'Home/Away Balance': stats['balance'],
            'Byes': stats['byes'],
        })

    df = pd.DataFrame(team_data, columns=[
        'Team', 'Identity', 'Games', 'Home Games', 'Away Games', 'Home/Away Balance', 'Byes'
    ])
    df.to_excel(writer, sheet_name=sheet_name, index=False)

    worksheet = writer.sheets[sheet_name]
    summary_row = len(df) + 3
    worksheet.write(summary_row, 0, 'Summary Statistics')
    worksheet.write(summary_row + 1, 0, f"Weeks: {summary.get('weeks', 0)}")
    worksheet.write(summary_row + 2, 0, f"Matches: {summary.get('total_matches', 0)}")
    worksheet.write(summary_row + 3, 0, f"Byes: {summary.get('total_byes', 0)}")


def _format_schedule_worksheet(worksheet, workbook, df: pd.DataFrame) -> None:
    """Apply formatting to the schedule worksheet."""
    header_format = workbook.add_format({
        'bold': True,
        'text_wrap': True,
        'valign': 'top',
        'fg_color': '#D7E4BC',
        'border': 1
    })

    column_widths = {
        'Week': 6,
        'Order': 6,
        'Type': 8,
        'Home': 24,
        'Away': 24,
        'Bye': 24,
    }

    for i, col in enumerate(df.columns):
        worksheet.set_column(i, i, column_widths.get(col, 12))

    for col_num, value in enumerate(df.columns.values):
        worksheet.write(0, col_num, value, header_format)

    # Highlight bye rows
    if 'Type' in df.columns and len(df):
        type_col = df.columns.get_loc('Type')
        worksheet.conditional_format(1, type_col, len(df), type_col, {
            'type': 'cell',
            'criteria': '==',
            'value': '"Bye"',
            'format': workbook.add_format({'bg_color': '#FFEB9C'})
        })
