"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Value Objects matemáticos/lógicos reusables en CUALQUIER dominio:
     - NonNegativeValue (longitudes, conteos)
   • Tipos primitivos validados
   • Helpers genéricos SIN dependencia del códec

🚫 ¿Qué NO pertenece aquí?
   • Descriptores de tipo (IntKind, Array, Shapes)
   • Reglas del códec (orden de campos, big-endian, cursores)

✅ Dónde poner lo específico del dominio:
   → modules/marshaling/domain/
"""
