# attackrecords

This package stores cyber-attack records in a compact binary file and reads them back.

Each record holds an attack id, a year, a financial loss, and four text fields:
country, attack type, target industry and defense mechanism. The package turns a
CSV file of such records into a binary file. That file starts with a fixed
276-byte header, and variable-length data records follow it. Once the file
exists, you can list every record in it or search it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

The `attackrecords` command reads its instructions from standard input. Apart
from `--help` it takes no arguments. The first number on standard input chooses
the operation:

- `1 <input.csv> <output.bin>` reads the CSV file and writes the binary file.
  It then prints a checksum: the sum of the binary file's bytes divided by 100,
  with six decimals.
- `2 <file.bin>` prints every record that is not marked as removed.
- `3 <file.bin>` runs searches. After the file name comes the number of
  searches. Each search gives a field count, then that many `field value` pairs.
  A record matches a search when every pair matches.

### CSV input

The first line of the CSV file holds the column titles. The seven titles are
read as fixed widths of 23, 27, 28, 26, 38, 38 and 67 bytes, each followed by
one separator. Each following line holds one record with fields in this order:
`idAttack,year,financialLoss,country,attackType,targetIndustry,defenseMechanism`.
An empty field is stored as -1 for the numbers and is left out for the text
fields.

### Searches

The search fields are `idAttack`, `year`, `financialLoss`, `country`,
`attackType`, `targetIndustry` and `defenseMechanism`. Give text values in
double quotes. A value that starts with `N` or `n`, such as `NULO`, is read as
an empty string. No record has an empty text field, so such a value matches
nothing. `financialLoss` is compared at single precision.

### Examples

```
printf '1 attacks.csv attacks.bin\n' | attackrecords
printf '2 attacks.bin\n' | attackrecords
printf '3 attacks.bin 1 2 year 2020 country "Brazil"\n' | attackrecords
```

### Output

Each record is printed as seven labelled lines followed by a blank line. An
empty field is shown as `NADA CONSTA`.

Each search prints the matching records, followed by a line of asterisks. If no
record matches, the search prints `Registro inexistente.` before that line.

If the file holds no records at all, operations 2 and 3 print
`Registro inexistente.` and one line of asterisks.

If a file cannot be opened or read, or a search names an unknown field, the
command prints `Falha no processamento do arquivo.` An operation number other
than 1, 2 or 3 prints `Número inválido`.

## Library use

```python
from attackrecords.operations import build_binary, iter_records, format_record

checksum = build_binary("attacks.csv", "attacks.bin")
for record in iter_records("attacks.bin"):
    print(format_record(record), end="")
```

### `attackrecords.operations`

- `checksum` computes the same checksum value that operation 1 prints.
- `print_records` writes the listing to a text stream.
- `search_records` writes search results to a text stream.
- `read_query` reads one search from an `InputScanner`.
- Every failure raises `ProcessingError`.

### Other modules

- `attackrecords.header.FileHeader` and `attackrecords.records.Record` both
  `pack` to the on-disk layout and `unpack` from it.
- `Record.matches(field, value)` checks one field against a value.
- `attackrecords.scanner.InputScanner` reads words, integers, floats and quoted
  strings from a text stream.

## Limitations

Files can only be built, listed and searched. The package cannot insert, delete
or update records in an existing file. The header fields for removed records
are written, but nothing ever changes them, and records marked as removed are
only skipped when the file is read.