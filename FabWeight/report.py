"""Weight takeoff of a set of elements."""
import xlsxwriter
from . import logger
from .weight import calculate, DECIMALS

HEADER = ['Element', 'Category', 'Strategy', 'Weight, lb']


def takeoff_table(elements):
    """Build weight takeoff table, heaviest elements first.

    Returns
    -------
    list of list
        Header row followed by one row per element.
    """
    rows = []
    for element in elements:
        result = calculate(element)
        rows.append([str(result.element_id), element.category.value,
                     result.strategy, result.weight])
    rows.sort(key=lambda row: row[-1], reverse=True)
    return [HEADER] + rows


def write_takeoff(elements, filename):
    """Write weight takeoff table to `filename`.xlsx.

    Returns
    -------
    str
        Name of the written file.
    """
    table = takeoff_table(elements)
    total = round(sum(row[-1] for row in table[1:]), DECIMALS)
    filename += '.xlsx'
    with xlsxwriter.Workbook(filename) as workbook:
        worksheet = workbook.add_worksheet('Takeoff')
        for row_n, row in enumerate(table):
            for col_n, data in enumerate(row):
                worksheet.write(row_n, col_n, data)
        header_format = workbook.add_format({'bold': True,
                                             'font_size': 12,
                                             'bottom': 3})
        weight_format = workbook.add_format({'num_format': '0.000'},)
        worksheet.set_row(0, None, header_format)
        worksheet.set_column(3, 3, None, weight_format)
        # Writing total
        N_rows = len(table)
        worksheet.write(N_rows+1, 2, 'Total weight, lb')
        worksheet.write(N_rows+1, 3, total, weight_format)
        worksheet.autofit()
        worksheet.freeze_panes(1, 0)
    logger.info(f'Takeoff of {N_rows-1} elements, {total} lb, '
                f'written to {filename}')
    return filename
