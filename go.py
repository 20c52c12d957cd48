import pdfenc
from pdfenc import Name, Reference, Stream

import argparse
import logging
import os
import subprocess
import sys

DIR = os.path.dirname(os.path.abspath(__file__))

parser = argparse.ArgumentParser()
parser.add_argument('--test', '-t', action='store_true')
parser.add_argument('--sample', '-s', metavar='FILE', help='write a one-page sample body to FILE')
args = parser.parse_args()

if os.environ.get('DEBUG'):
    logging.basicConfig(level=logging.DEBUG)

if args.test:
    subprocess.check_call([sys.executable, '-m', 'pytest', os.path.join(DIR, 'tests')])

if args.sample:
    pdf = pdfenc.Pdf()
    pages = Reference('Pages')
    pdf.add('Catalog', {'Type': Name('Catalog'), 'Pages': pages})
    pdf.add('Pages', {'Type': Name('Pages'), 'Kids': [Reference('Page')], 'Count': 1})
    pdf.add('Page', {
        'Type': Name('Page'),
        'Parent': pages,
        'MediaBox': [0, 0, 612, 792],
        'Contents': Reference('Contents'),
    })
    pdf.add('Contents', Stream.from_bytes(b'BT /F1 24 Tf 72 720 Td (sample) Tj ET'))
    pdf.save(args.sample)
    print('wrote {} objects to {}'.format(len(pdf.body), args.sample))
