import os
from app import create_app, db
from app.models import User, Role, Content, Tag, SearchDocument

# 从环境变量获取配置模式
config_name = os.getenv('FLASK_ENV') or os.getenv('FLASK_CONFIG') or 'default'
if config_name in ('development', 'dev'):
    config_name = 'development'

app = create_app(config_name)

@app.shell_context_processor
def make_shell_context():
    """
    配置 Flask Shell 上下文。
    """
    return dict(
        db=db,
        app=app,
        User=User,
        Role=Role,
        Content=Content,
        Tag=Tag,
        SearchDocument=SearchDocument,
    )

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5000)
