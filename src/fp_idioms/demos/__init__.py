"""
Demo programs

- closures_demo: функции как значения, замыкания, currying, composition, замер времени
- even_squares_demo: сумма квадратов чётных чисел imperative vs functional
"""
