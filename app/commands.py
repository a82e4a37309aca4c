import click
import random
from flask.cli import with_appcontext
from app.extensions import db
from app.models.auth import User, Role
from app.models.content import Content, Tag
from app.models.search import SearchDocument
from app.services.search_service import SearchService
from app.utils.fake_gen import fake
from app.utils.validators import slugify


@click.command('status')
@with_appcontext
def status():
    """
    查看当前数据库中的数据统计。
    """
    click.echo(click.style('📊 Inkwell database status:', fg='cyan', bold=True))

    try:
        c_count = Content.query.filter_by(is_deleted=False).count()
        p_count = Content.query.filter_by(is_deleted=False, status=Content.STATUS_PUBLISHED).count()
        t_count = Tag.query.count()
        s_count = SearchDocument.query.count()

        click.echo(f" - Contents: \t{c_count}")
        click.echo(f" - Published: \t{p_count}")
        click.echo(f" - Tags: \t{t_count}")
        click.echo(f" - Indexed: \t{s_count}")

        if s_count != p_count:
            click.echo(click.style('⚠ Search index is out of sync, run flask reindex.', fg='yellow'))
        else:
            click.echo(click.style('✔ Search index is in sync.', fg='green'))

    except Exception as e:
        click.echo(click.style(f'✘ Failed to read database: {str(e)}', fg='red'))
        click.echo("Did you run 'flask db upgrade'?")


@click.command('reindex')
@with_appcontext
def reindex():
    """按已发布内容重建搜索索引"""
    count = SearchService.reindex_all()
    click.echo(click.style(f'✔ Indexed {count} published contents.', fg='green'))


@click.command('seed')
@click.option('--count', default=30, help='Number of contents to generate')
@with_appcontext
def seed(count):
    """
    初始化并填充演示数据 (管理员、标签、内容、索引)。
    警告：这将清除数据库中的现有数据！
    """
    click.echo(click.style(f'⚡ Seeding Inkwell ({count} contents)...', fg='cyan', bold=True))

    db.drop_all()
    db.create_all()

    init_auth()
    tags = init_tags()
    init_contents(tags, count)

    indexed = SearchService.reindex_all()
    click.echo(click.style('✔ Seed complete!', fg='green', bold=True))
    click.echo("Admin account: admin@inkwell.io / password: admin")
    click.echo(f"Indexed {indexed} published contents.")


def init_auth():
    """初始化角色和管理员"""
    admin_role = Role(name='Admin', is_admin=True)
    editor_role = Role(name='Editor', is_admin=False)
    db.session.add_all([admin_role, editor_role])

    admin = User(
        username='admin',
        email='admin@inkwell.io',
        password='admin',
        role=admin_role,
        is_admin=True,
    )
    db.session.add(admin)
    db.session.commit()


def init_tags():
    """初始化标签目录"""
    tags = []
    for name in fake.tag_names():
        tag = Tag(slug=slugify(name), name=name)
        db.session.add(tag)
        tags.append(tag)
    db.session.commit()
    return tags


def init_contents(tags, count):
    """生成内容，约三分之一为导入内容 (带 externalSource)"""
    for i in range(count):
        title = fake.content_title()
        metadata = {}
        if i % 3 == 0:
            metadata = fake.external_source()

        content = Content(
            title=title,
            description=fake.sentence(nb_words=12),
            slug=f"{slugify(title)}-{i}",
            body='\n\n'.join(fake.paragraphs(nb=3)),
            type=random.choice(Content.TYPES),
            status=random.choice([Content.STATUS_PUBLISHED, Content.STATUS_PUBLISHED,
                                  Content.STATUS_DRAFT, Content.STATUS_ARCHIVED]),
            meta_data=metadata,
            likes=random.randint(0, 500),
            saves=random.randint(0, 120),
        )
        content.assign_tags(random.sample(tags, k=random.randint(0, min(3, len(tags)))))
        db.session.add(content)
    db.session.commit()
