import click
from atividades import create_app
from atividades.errors import AppError
from atividades.services.auth_service import register_user
from atividades.services.session_service import purge_expired_sessions

app = create_app()


@app.cli.command("create-user")
@click.argument("username")
@click.argument("email")
@click.argument("password")
@click.option("--first-name", required=True, help="Nome do usuário.")
@click.option("--last-name", required=True, help="Sobrenome do usuário.")
def create_user(username, email, password, first_name, last_name):
    """Cria um novo usuário (papel inicial: publicador)."""
    try:
        user = register_user({
            'username': username,
            'email': email,
            'password': password,
            'firstName': first_name,
            'lastName': last_name,
        })
    except AppError as exc:
        raise click.ClickException(exc.message)

    click.echo(f"Usuário '{user.username}' criado com sucesso (id={user.id}).")


@app.cli.command("purge-sessions")
def purge_sessions():
    """Remove as sessões expiradas do banco."""
    removed = purge_expired_sessions()
    click.echo(f"{removed} sessão(ões) expirada(s) removida(s).")


if __name__ == '__main__':
    app.run(debug=True, port=8000)
