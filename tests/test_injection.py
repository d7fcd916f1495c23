from importmaps.injection import find_last_import_statement, inject_script

SENDER = "/* sender */"


def test_finds_end_of_last_import_line():
    code = "import a from 'b';\nimport 'c'\nconsole.log(a);\n"
    index = find_last_import_statement(code)
    assert code[:index] == "import a from 'b';\nimport 'c'"


def test_no_import_returns_minus_one():
    assert find_last_import_statement("const x = 1;\n") == -1


def test_dynamic_imports_and_import_meta_are_not_statements():
    code = "const m = await import('x');\nconsole.log(import.meta.url);\n"
    assert find_last_import_statement(code) == -1


def test_multiline_named_import_is_kept_whole():
    code = "import {\n  a,\n  b as c,\n} from \"./x.js\";\nrun(a, c);\n"
    out = inject_script(code, SENDER)
    assert out == "import {\n  a,\n  b as c,\n} from \"./x.js\";\n" + SENDER + "\n\nrun(a, c);\n"


def test_injects_after_last_import():
    code = "import { a } from '/x.js';\nimport * as ns from '/y.js';\nstart();\n"
    out = inject_script(code, SENDER)
    assert out.index(SENDER) > out.index("import * as ns")
    assert out.index(SENDER) < out.index("start();")
    # les imports statiques restent statiques
    assert "await import" not in out
    assert out.replace("\n" + SENDER + "\n", "") == code


def test_prepends_when_no_import():
    assert inject_script("start();\n", SENDER) == SENDER + "\nstart();\n"
