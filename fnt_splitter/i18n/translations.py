"""
Translation strings for all supported languages.

To add a new language:
1. Add an entry to LANGUAGES dict with code and display name
2. Add a new dict in TRANSLATIONS with the same structure as 'en'
3. Translate all strings

Language codes follow BCP 47 standard (e.g., "en", "pt_BR", "es", "ja")
"""

# Available languages with their display names
LANGUAGES = {
    "en": "English",
    "pt_BR": "Português (Brasil)",
}

# =============================================================================
# ENGLISH (Default)
# =============================================================================
EN = {
    # Grammar errors
    "grammar": {
        "expected_line": "expected `{section}` line",
        "unexpected_line": "expected `{section}` line, found `{found}` at line {line}",
        "missing_field": "`{section}` line {line} is missing field `{field}`",
        "malformed_field": "`{section}` line {line} has a malformed field: {token!r}",
        "duplicate_field": "`{section}` line {line} repeats field `{field}`",
        "not_string": "field `{field}` in `{section}` line {line} is not a quoted string: {value!r}",
        "not_unsigned": "field `{field}` in `{section}` line {line} is not an unsigned integer: {value!r}",
        "not_signed": "field `{field}` in `{section}` line {line} is not a signed integer: {value!r}",
        "not_list": "field `{field}` in `{section}` line {line} is not a comma separated integer list: {value!r}",
        "out_of_range": "field `{field}` in `{section}` line {line} does not fit in 32 bits: {value}",
        "list_length": "field `{field}` in `{section}` line {line} needs {expected} values, got {count}",
        "zero_size": "field `{field}` in `{section}` line {line} must be greater than 0",
        "too_few_chars": "`chars` declares {expected} `char` records but only {found} follow",
        "too_many_chars": "`chars` declares {expected} `char` records but another follows at line {line}",
    },

    # Geometry errors
    "geometry": {
        "outside_atlas": "glyph {id} ({letter!r}) at x={x} y={y} {width}x{height} "
                         "lies outside the {atlas_width}x{atlas_height} atlas",
        "outside_canvas": "glyph image {filename} placed at x={x} y={y} with size {width}x{height} "
                          "exceeds the {canvas_width}x{canvas_height} canvas",
        "compare_size": "cannot compare a {reference} image with a {candidate} image",
    },

    # Resource errors
    "resource": {
        "missing_glyph": "missing glyph image: {path}",
        "decode_failed": "could not read image {path}: {error}",
        "encode_failed": "could not write image {path}: {error}",
        "write_failed": "could not write font file {path}: {error}",
        "read_failed": "could not read font file {path}: {error}",
        "path_missing": "path does not exist: {path}",
        "not_a_folder": "path is not a folder: {path}",
        "not_a_file": "path is not a file: {path}",
        "no_font_file": "could not find a .fnt file in {path}",
        "bad_file_name": "glyph {id} letter {letter!r} cannot be used as a file name",
    },

    # Command line
    "cli": {
        "description": "Split Geometry Dash font sprite sheets into glyph images and combine them back.",
        "split_help": "Split a single font sprite sheet into many individual images",
        "combine_help": "Recombine split images into a single sprite sheet",
        "compare_help": "List the glyphs that differ between the original and the rebuilt sheet",
        "orig_help": "Folder holding the .fnt file and its sprite sheet (default: {default})",
        "sprites_help": "Folder holding the individual glyph images (default: {default})",
        "dest_help": "Folder receiving the rebuilt sprite sheet (default: {default})",
        "workers_help": "Number of worker threads for per-glyph image work (default: 1)",
        "lang_help": "Message language: {languages}",
        "log_file_help": "Also write a detailed log to this file",
        "verbose_help": "Show debug messages",
        "split_done": "Split {count} glyphs into {path}",
        "combine_done": "Wrote {path}",
        "compare_same": "All glyphs match",
        "compare_changed": "{count} glyph(s) differ: {names}",
        "failed": "Error: {message}",
    },
}

# =============================================================================
# PORTUGUESE (Brazil)
# =============================================================================
PT_BR = {
    # Grammar errors
    "grammar": {
        "expected_line": "linha `{section}` esperada",
        "unexpected_line": "linha `{section}` esperada, encontrado `{found}` na linha {line}",
        "missing_field": "linha `{section}` {line} não tem o campo `{field}`",
        "malformed_field": "linha `{section}` {line} tem um campo malformado: {token!r}",
        "duplicate_field": "linha `{section}` {line} repete o campo `{field}`",
        "not_string": "campo `{field}` da linha `{section}` {line} não é um texto entre aspas: {value!r}",
        "not_unsigned": "campo `{field}` da linha `{section}` {line} não é um inteiro sem sinal: {value!r}",
        "not_signed": "campo `{field}` da linha `{section}` {line} não é um inteiro: {value!r}",
        "not_list": "campo `{field}` da linha `{section}` {line} não é uma lista de inteiros separada por vírgulas: {value!r}",
        "out_of_range": "campo `{field}` da linha `{section}` {line} não cabe em 32 bits: {value}",
        "list_length": "campo `{field}` da linha `{section}` {line} precisa de {expected} valores, recebeu {count}",
        "zero_size": "campo `{field}` da linha `{section}` {line} deve ser maior que 0",
        "too_few_chars": "`chars` declara {expected} registros `char` mas apenas {found} aparecem",
        "too_many_chars": "`chars` declara {expected} registros `char` mas há outro na linha {line}",
    },

    # Geometry errors
    "geometry": {
        "outside_atlas": "glifo {id} ({letter!r}) em x={x} y={y} {width}x{height} "
                         "fica fora do atlas {atlas_width}x{atlas_height}",
        "outside_canvas": "imagem do glifo {filename} em x={x} y={y} com tamanho {width}x{height} "
                          "ultrapassa a tela {canvas_width}x{canvas_height}",
        "compare_size": "não é possível comparar uma imagem {reference} com uma imagem {candidate}",
    },

    # Resource errors
    "resource": {
        "missing_glyph": "imagem de glifo ausente: {path}",
        "decode_failed": "não foi possível ler a imagem {path}: {error}",
        "encode_failed": "não foi possível gravar a imagem {path}: {error}",
        "write_failed": "não foi possível gravar o arquivo de fonte {path}: {error}",
        "read_failed": "não foi possível ler o arquivo de fonte {path}: {error}",
        "path_missing": "caminho não existe: {path}",
        "not_a_folder": "caminho não é uma pasta: {path}",
        "not_a_file": "caminho não é um arquivo: {path}",
        "no_font_file": "nenhum arquivo .fnt encontrado em {path}",
        "bad_file_name": "a letra {letter!r} do glifo {id} não pode ser usada como nome de arquivo",
    },

    # Command line
    "cli": {
        "description": "Divide folhas de sprites de fontes do Geometry Dash em imagens de glifos e as junta de volta.",
        "split_help": "Divide uma folha de sprites em várias imagens individuais",
        "combine_help": "Junta as imagens divididas em uma única folha de sprites",
        "compare_help": "Lista os glifos que diferem entre a folha original e a reconstruída",
        "orig_help": "Pasta com o arquivo .fnt e sua folha de sprites (padrão: {default})",
        "sprites_help": "Pasta com as imagens individuais dos glifos (padrão: {default})",
        "dest_help": "Pasta que recebe a folha reconstruída (padrão: {default})",
        "workers_help": "Número de threads para o trabalho por glifo (padrão: 1)",
        "lang_help": "Idioma das mensagens: {languages}",
        "log_file_help": "Também grava um log detalhado neste arquivo",
        "verbose_help": "Mostra mensagens de depuração",
        "split_done": "{count} glifos divididos em {path}",
        "combine_done": "Gravado {path}",
        "compare_same": "Todos os glifos são iguais",
        "compare_changed": "{count} glifo(s) diferem: {names}",
        "failed": "Erro: {message}",
    },
}

# All translations indexed by language code
TRANSLATIONS = {
    "en": EN,
    "pt_BR": PT_BR,
}
