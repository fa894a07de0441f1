"""
Prelude runtime: контейнеры, tagged unions и форматирование.

Минимальный runtime, который подключается к программам, сгенерированным
транспайлером. Не зависит от внешних систем; только in-memory вычисления.
"""
