# tests/test_sa/utils.py
from typing import List, Dict, Any
from sqlalchemy import inspect, text
from sqlalchemy.orm import Session

class DBInspector:
    def __init__(self, session: Session):
        self.session = session
        self.engine = session.get_bind()
        self.inspector = inspect(self.engine)

    def get_table_info(self, table_name: str) -> Dict[str, Any]:
        """Get columns and constraints of a specific table"""
        return {
            'columns': self.inspector.get_columns(table_name),
            'primary_key': self.inspector.get_pk_constraint(table_name),
            'foreign_keys': self.inspector.get_foreign_keys(table_name),
        }

    def get_all_tables(self) -> List[str]:
        """Get list of all tables in database"""
        return self.inspector.get_table_names()

    def count_rows(self, table_name: str) -> int:
        """Get row count for a table"""
        result = self.session.execute(text(f"SELECT COUNT(*) FROM {table_name}"))
        return result.scalar()

def compare_model_to_db(session: Session, model_class) -> List[str]:
    """Compare SQLAlchemy model to actual database table"""
    differences = []
    inspector = DBInspector(session)
    db_info = inspector.get_table_info(model_class.__tablename__)

    model_columns = {c.key for c in inspect(model_class).columns}
    db_columns = {c['name'] for c in db_info['columns']}

    for col_name in model_columns - db_columns:
        differences.append(f"Column '{col_name}' exists in model but not in database")
    for col_name in db_columns - model_columns:
        differences.append(f"Column '{col_name}' exists in database but not in model")

    return differences
