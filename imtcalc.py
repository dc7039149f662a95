#!/usr/bin/env python3
#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import argparse
import logging
import sys

import ptdistricts

from ptformat import format_portuguese_price
from report import Report, TextReport, HtmlReport
from tax.pt import IMTResult, calculate_imt, calculate_stamp_duty, imt_breakdown, schedules


locations = ['mainland', 'madeira', 'azores']


def write_report(report:Report, result:IMTResult, stamp_duty:float=0, loan_amount:float=0) -> None:
    fmt = format_portuguese_price

    report.start('IMT')

    report.write_heading('Parameters')
    rows = [
        ('Property value', fmt(result.property_value)),
        ('Property type', result.property_type),
        ('Location', result.location),
    ]
    if loan_amount:
        rows.append(('Loan amount', fmt(loan_amount)))
    report.write_table(rows, just='lr', indent='  ')

    if result.details is not None:
        report.write_paragraph(result.details)
        report.end()
        return

    if result.property_type in schedules:
        report.write_heading('Brackets')
        rows = []
        for lbound, ubound, rate, taxable, tax in imt_breakdown(result.property_value, result.property_type):
            band = f'{fmt(lbound)} - {fmt(ubound)}' if ubound is not None else 'whole value'
            rows.append((band, f'{rate:.1%}', fmt(taxable), fmt(tax)))
        report.write_table(rows, header=['Bracket', 'Rate', 'Taxable', 'Tax'], just='lrrr', indent='  ')

    report.write_heading('Result')
    rows = [
        ('IMT', fmt(result.imt)),
        ('Effective rate', f'{result.rate:.2f}%'),
        ('Island reduction', result.island_reduction),
    ]
    if loan_amount:
        rows.append(('Stamp duty (loan)', fmt(stamp_duty)))
    report.write_table(rows, just='lr', indent='  ')

    report.end()


def main():
    logging.basicConfig(format='%(asctime)s %(name)s %(levelname)s %(message)s', level=logging.INFO)

    argparser = argparse.ArgumentParser(description='Portuguese property transfer tax (IMT) calculator.')
    argparser.add_argument('-t', '--type', dest='property_type', choices=list(schedules.keys()), default='residential', help='property type')
    group = argparser.add_mutually_exclusive_group()
    group.add_argument('-l', '--location', choices=locations, default=None, help='property location')
    group.add_argument('-d', '--district', metavar='DISTRICT', default=None, help='property district, e.g. Lisboa')
    argparser.add_argument('--loan', metavar='AMOUNT', type=float, default=0, help='mortgage loan amount, for stamp duty')
    argparser.add_argument('--format', choices=['text', 'html'], default='text')
    argparser.add_argument('value', metavar='VALUE', type=float, help='property value in euros')
    args = argparser.parse_args()

    if args.district is not None:
        if ptdistricts.get_district_info(args.district) is None:
            argparser.error(f'unknown district {args.district!r}; choose from {", ".join(ptdistricts.get_all_districts())}')
        location = ptdistricts.district_location(args.district)
    elif args.location is not None:
        location = args.location
    else:
        location = 'mainland'

    result = calculate_imt(args.value, args.property_type, location)
    stamp_duty = calculate_stamp_duty(args.loan)

    stream = sys.stdout
    report: Report
    if args.format == 'text':
        report = TextReport(stream)
    else:
        assert args.format == 'html'
        report = HtmlReport(stream)
    write_report(report, result, stamp_duty, args.loan)


if __name__ == '__main__':
    main()
