#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Render a raster image and a CSV table into a PDF report.
"""

import table_report_pdf.cli


if __name__ == "__main__":
	table_report_pdf.cli.main()
